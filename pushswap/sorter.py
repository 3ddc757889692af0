"""Chunk-based sorting of stack ``a`` using the stack operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from pushswap.quicksort import quicksort
from pushswap.stacks import Node, Stacks, is_sorted


@dataclass
class MinMax:
    """Position (1-based from the top) and value of an extreme element."""

    pos: int
    value: int
    top: int = 1


def find_min(stack: deque[Node], chunk: int) -> MinMax:
    """Find the smallest value belonging to ``chunk``."""
    if stack[0].chunk == chunk:
        result = MinMax(pos=1, value=stack[0].value)
    else:
        result = MinMax(pos=len(stack), value=stack[-1].value)
    for pos, node in enumerate(stack, start=1):
        if node.chunk == chunk and node.value < result.value:
            result.pos, result.value = pos, node.value
    result.top = 1
    return result


def find_max(stack: deque[Node], chunk: int) -> MinMax:
    """Find the largest value belonging to ``chunk``."""
    result = MinMax(pos=1, value=stack[0].value)
    for pos, node in enumerate(stack, start=1):
        if node.chunk == chunk and node.value > result.value:
            result.pos, result.value = pos, node.value
    result.top = 1
    return result


def _relative(extreme: MinMax, size: int) -> MinMax:
    """Turn a position into a move count from the nearer end of the stack."""
    if extreme.pos <= size // 2 + 1:
        return MinMax(pos=extreme.pos - 1, value=extreme.value, top=1)
    return MinMax(pos=size - extreme.pos + 1, value=extreme.value, top=0)


class _Sorter:
    def __init__(self, stacks: Stacks) -> None:
        self.stacks = stacks
        self.rot = 0

    # Splitting into chunks -------------------------------------------------

    def _check_border(self, mid: int, double_mid: int) -> None:
        a, b = self.stacks.a, self.stacks.b
        if len(b) >= 2 and b[0].value < double_mid:
            if a and a[0].value >= mid:
                self.stacks.rr()
            else:
                self.stacks.rb()

    def _split_chunk(self, num: int, chunk: int) -> None:
        a = self.stacks.a
        ordered = quicksort(node.value for node in a)
        mid = ordered[len(ordered) // 4]
        double_mid = ordered[len(ordered) // 8]
        count = 0
        if num % 4:
            count += 1
            num += 4 - num % 4
        quarter = num // 4
        while count < quarter:
            while a and a[0].value < mid:
                a[0].chunk = chunk
                self.stacks.pb()
                count += 1
                self._check_border(mid, double_mid)
            while a and a[0].value >= mid and count < quarter:
                self.stacks.ra()

    # Small stacks -----------------------------------------------------------

    def _sort_three(self) -> None:
        a, s = self.stacks.a, self.stacks
        first, second, third = (node.value for node in a)
        if first < second:
            if second > third:
                s.rra()
                if not s.is_sorted():
                    s.sa()
        elif second < third:
            if third < first:
                s.ra()
            else:
                s.sa()
        else:
            s.sa()
            s.rra()

    def _sort_little(self) -> None:
        a = self.stacks.a
        if len(a) == 2:
            if a[0].value > a[1].value:
                self.stacks.sa()
        elif len(a) == 3 and not self.stacks.is_sorted():
            self._sort_three()

    # Bringing values back ---------------------------------------------------

    def _rotate_top(self, moves: int) -> None:
        a, b = self.stacks.a, self.stacks.b
        if moves == 0 and self.rot and a[0].chunk == b[0].chunk:
            self.stacks.ra()
            if a[0].max_flag != 0:
                self.rot = 0
        for _ in range(moves):
            if self.rot and a[0].chunk == b[0].chunk:
                self.stacks.rr()
                if a[0].max_flag != 0:
                    self.rot = 0
            else:
                self.stacks.rb()

    def _move_closer(self, target: MinMax) -> None:
        a, b = self.stacks.a, self.stacks.b
        chunk_a, chunk_b = a[0].chunk, b[0].chunk
        if target.top:
            self._rotate_top(target.pos)
            return
        if self.rot == 1 and (chunk_a == chunk_b or chunk_a == b[-1].chunk):
            self.stacks.ra()
        for _ in range(target.pos):
            self.stacks.rrb()

    def _find_closer(self, chunk: int) -> None:
        b = self.stacks.b
        if not b:
            return
        size = len(b)
        high = _relative(find_max(b, chunk), size)
        low = _relative(find_min(b, chunk), size)
        if low.pos < high.pos:
            self._move_closer(low)
            b[0].max_flag = 0
        else:
            self._move_closer(high)
            b[0].max_flag = 1

    def _change_chunk(self) -> None:
        a, b = self.stacks.a, self.stacks.b
        if b[0].chunk != a[0].chunk and b[-1].chunk != a[0].chunk:
            while a[-1].value < a[0].value:
                self.stacks.rra()

    def _settle_a(self) -> None:
        top = self.stacks.a[0]
        if not self.stacks.b:
            return
        self._change_chunk()
        self.rot = 0 if top.max_flag else 1

    def _bring_back(self, chunk: int) -> None:
        self._find_closer(chunk)
        self.stacks.pa()
        self._settle_a()

    def _merge_back(self) -> None:
        b = self.stacks.b
        while b:
            chunk = b[0].chunk
            while b and b[0].chunk == chunk:
                self._bring_back(chunk)
            if not b:
                return
            while b and b[-1].chunk == chunk:
                self._bring_back(chunk)

    def run(self) -> None:
        a = self.stacks.a
        num = len(a)
        chunk = 1
        while num > 3:
            self._split_chunk(num, chunk)
            chunk += 1
            num = (num // 4) * 3 + num % 4
        self._sort_little()
        self._merge_back()
        while a and a[-1].value < a[0].value:
            self.stacks.rra()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` in place, emptying ``b`` back into it."""
    _Sorter(stacks).run()


def push_swap(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``; none if already sorted."""
    values = list(values)
    if is_sorted(values):
        return []
    stacks = Stacks(values, record=True)
    sort_stacks(stacks)
    return stacks.operations