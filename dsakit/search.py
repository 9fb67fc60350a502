"""Searches over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def ternary_search(items: Sequence[Any], element: Any) -> int | None:
    """Return an index of ``element`` in sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid1 = (2 * low + high) // 3
        mid2 = (low + 2 * high) // 3
        if element == items[mid1]:
            return mid1
        if element == items[mid2]:
            return mid2
        if element < items[mid1] and element < items[mid2]:
            high = mid1 - 1
        elif element > items[mid1] and element < items[mid2]:
            low = mid1 + 1
            high = mid2 - 1
        else:
            low = mid2 + 1
    return None


def binary_search(items: Sequence[Any], element: Any) -> int | None:
    """Return an index of ``element`` in sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == element:
            return mid
        if items[mid] > element:
            high = mid - 1
        else:
            low = mid + 1
    return None