"""Counting sort for small non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable


def counting_sort(values: Iterable[int], max_value: int) -> list[int]:
    """Return ``values`` in ascending order; each must lie in ``0..max_value``."""
    if max_value < 0:
        raise ValueError(f"max_value must not be negative, got {max_value}")
    counts = [0] * (max_value + 1)
    for value in values:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} is outside the range 0..{max_value}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]