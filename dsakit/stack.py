"""A fixed-size last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class StackOverflowError(OverflowError):
    """Raised when pushing onto a stack that is already full."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking at an empty stack."""


class Stack:
    """A bounded LIFO stack that holds at most ``size`` elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._items: list[Any] = []

    def push(self, element: Any) -> None:
        """Put ``element`` on top of the stack."""
        if len(self._items) >= self.size:
            raise StackOverflowError("Stack overflowed")
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("Stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("The stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)