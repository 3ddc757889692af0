"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from pushswap.args import ArgumentError, validate_args, validate_checker_args
from pushswap.sorter import push_swap
from pushswap.stacks import OperationError, Stacks

_EXIT_LINE = "exit\n"


def run_checker(stacks: Stacks, lines: Iterable[str]) -> str:
    """Apply newline-terminated instructions and report "OK" or "KO".

    Reading stops at the end of input or at an "exit" line. A line that is
    not exactly an operation followed by a newline raises OperationError.
    """
    for line in lines:
        if line == _EXIT_LINE:
            break
        if not line.endswith("\n"):
            raise OperationError(f"unterminated instruction: {line!r}")
        stacks.apply(line[:-1])
    return "OK" if stacks.is_sorted() else "KO"


def push_swap_main(argv: list[str] | None = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return 0
    try:
        numbers = validate_args(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    for op in push_swap(numbers):
        sys.stdout.write(op + "\n")
    return 0


def checker_main(argv: list[str] | None = None) -> int:
    """Read instructions from standard input and check that they sort."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return 0
    try:
        numbers = validate_checker_args(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    try:
        verdict = run_checker(Stacks(numbers), sys.stdin)
    except OperationError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(verdict + "\n")
    return 0