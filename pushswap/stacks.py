"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


class OperationError(ValueError):
    """Raised for an instruction that is not one of the stack operations."""


@dataclass
class Node:
    """One element of a stack, with the bookkeeping the sorter attaches to it."""

    value: int
    chunk: int = 0
    max_flag: int = -1


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease."""
    return all(left <= right for left, right in pairwise(values))


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its leftmost node.

    With ``record`` set, every operation performed is appended to
    ``operations`` under the name it is printed with.
    """

    def __init__(self, values: Iterable[int] = (), record: bool = False) -> None:
        self.a: deque[Node] = deque(Node(value) for value in values)
        self.b: deque[Node] = deque()
        self.record = record
        self.operations: list[str] = []

    def __repr__(self) -> str:
        a_values = [node.value for node in self.a]
        b_values = [node.value for node in self.b]
        return f"Stacks(a={a_values}, b={b_values})"

    def _emit(self, name: str) -> None:
        if self.record:
            self.operations.append(name)

    @staticmethod
    def _swap(stack: deque[Node]) -> None:
        # Only the values change places; the nodes keep their bookkeeping.
        if len(stack) >= 2:
            stack[0].value, stack[1].value = stack[1].value, stack[0].value

    @staticmethod
    def _push(source: deque[Node], target: deque[Node]) -> None:
        if source:
            target.appendleft(source.popleft())

    @staticmethod
    def _rotate(stack: deque[Node]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[Node]) -> None:
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the two top values of ``a``."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top values of ``b``."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the two top values of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._emit("rrr")

    def apply(self, name: str) -> None:
        """Perform the operation called ``name``."""
        if name not in OPERATIONS:
            raise OperationError(f"unknown operation: {name!r}")
        getattr(self, name)()

    def is_sorted(self) -> bool:
        """Return True if stack ``a`` is in ascending order."""
        return is_sorted(node.value for node in self.a)