"""Fixed-capacity stack with no growth."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """A stack whose capacity is fixed when it is created."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Push ``item``; raises ``OverflowError`` when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("bounded stack is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raises ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self.capacity})"