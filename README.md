# pushswap

Sort a list of integers using two stacks, `a` and `b`, and only these
operations:

| op    | effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

Operations on a stack with too few elements do nothing.

## Installation

```
pip install .
```

## Commands

### push_swap

```
push_swap 3 2 1
```

Takes the numbers as arguments, the first argument on top of stack `a`, and
prints one operation per line that sorts them in ascending order. If the
input is already sorted, nothing is printed. With no arguments it does
nothing.

Each argument must be an optional `+` or `-` followed by digits only, within
the signed 32-bit range, and no two arguments may have the same value.
Otherwise `Error` is printed on standard error and the exit status is 1.

### checker

```
push_swap 3 2 1 | checker 3 2 1
```

Takes the same kind of arguments, reads operations from standard input, one
per line, until end of input or a line `exit`, then prints `OK` if stack `a`
ends up sorted and `KO` otherwise.

Its argument check differs slightly: duplicates are found by comparing the
first 20 characters of the arguments as text, and a lone sign is accepted
and read as 0. Bad arguments print `Error` on standard error with exit
status 1. An unknown operation, or a last line without a newline, prints
`Error` on standard error and nothing else, with exit status 0.

## Library use

```python
from pushswap.sorter import push_swap
from pushswap.stacks import Stacks

ops = push_swap([5, 1, 4, 2, 3])

stacks = Stacks([5, 1, 4, 2, 3])
for op in ops:
    stacks.apply(op)
assert stacks.is_sorted()
```

- `pushswap.stacks`: `Stacks(values, record=False)` holds the two stacks as
  deques of `Node` (top on the left) and has one method per operation plus
  `apply(name)`, which raises `OperationError` for an unknown name. With
  `record=True` each performed operation is appended to `operations`.
  `is_sorted(values)` tells whether values never decrease.
- `pushswap.sorter`: `push_swap(values)` returns the list of operations;
  `sort_stacks(stacks)` sorts a `Stacks` in place. `find_min` and `find_max`
  locate the extreme value of a chunk in a stack and return a `MinMax`.
- `pushswap.args`: `validate_args` and `validate_checker_args` check
  command-line arguments, return them as integers and raise `ArgumentError`
  on bad input; `parse_int` reads the leading number of a string as a
  32-bit integer.
- `pushswap.quicksort`: `quicksort(items)` returns a sorted copy.
- `pushswap.cli`: `run_checker(stacks, lines)` applies newline-terminated
  instructions and returns `"OK"` or `"KO"`; `push_swap_main` and
  `checker_main` are the two commands.

## Tests

```
pip install .[test]
pytest
```