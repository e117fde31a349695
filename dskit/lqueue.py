"""FIFO queue stored as a singly linked chain with a rear pointer."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedQueue(Generic[T]):
    """FIFO queue holding references to the caller's objects."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the rear."""
        node = _Node(item)
        if self._rear is None:
            self._head = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front item."""
        if self._head is None:
            raise IndexError("dequeue from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> T:
        """Return the front item without removing it."""
        if self._head is None:
            raise IndexError("front of empty queue")
        return self._head.data

    def rear(self) -> T:
        """Return the rear item without removing it."""
        if self._rear is None:
            raise IndexError("rear of empty queue")
        return self._rear.data

    def empty(self) -> bool:
        """True when the queue holds no items."""
        return self._head is None

    def clear(self, deinit: Callable[[T], Any] | None = None) -> None:
        """Remove every item, front first, passing each to ``deinit`` if given."""
        while self._head is not None:
            item = self.dequeue()
            if deinit is not None:
                deinit(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the rear."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"