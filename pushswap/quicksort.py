"""Quicksort with the first element as pivot."""

from __future__ import annotations

from collections.abc import Iterable


def quicksort(items: Iterable[int]) -> list[int]:
    """Return the items in ascending order; the input is left untouched."""
    ordered: list[int] = []
    # Each entry is (is_pivot, payload): a placed pivot or a part still to sort.
    pending: list[tuple[bool, object]] = [(False, list(items))]
    while pending:
        is_pivot, payload = pending.pop()
        if is_pivot:
            ordered.append(payload)
            continue
        if not payload:
            continue
        pivot, *rest = payload
        pending.append((False, [x for x in rest if x > pivot]))
        pending.append((True, pivot))
        pending.append((False, [x for x in rest if x <= pivot]))
    return ordered