"""A fixed-capacity first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when removing from a queue that holds nothing."""


class CircularQueue:
    """A bounded FIFO queue that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_full(self) -> bool:
        """Return True when no more elements fit."""
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(element)

    def dequeue(self) -> Any:
        """Remove and return the element at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def display(self) -> str:
        """Return the elements from front to rear, separated by spaces."""
        if self.is_empty():
            return "queue is empty"
        return " ".join(str(item) for item in self)