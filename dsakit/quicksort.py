"""Quicksort with a first-element pivot."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around ``items[low]``.

    Afterwards the pivot sits at the returned index, everything before it is
    not greater than the pivot and everything after it is greater.
    """
    if not 0 <= low <= high < len(items):
        raise ValueError(f"invalid range {low}..{high} for {len(items)} items")
    pivot = items[low]
    small, big = low + 1, high
    while small <= big:
        while small <= high and items[small] <= pivot:
            small += 1
        while items[big] > pivot:
            big -= 1
        if small < big:
            items[small], items[big] = items[big], items[small]
    items[low], items[big] = items[big], items[low]
    return big


def quicksort(items: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``items`` in ascending order."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        index = partition(result, low, high)
        pending.append((low, index - 1))
        pending.append((index + 1, high))
    return result