"""Stack stored as a singly linked chain of nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from dskit.vstack import StackEmptyError

T = TypeVar("T")


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedStack(Generic[T]):
    """LIFO stack holding references to the caller's objects."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        self._head = _Node(item, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._head is None:
            raise StackEmptyError("pop from empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        """Return the top item without removing it."""
        if self._head is None:
            raise StackEmptyError("top of empty stack")
        return self._head.data

    def empty(self) -> bool:
        """True when the stack holds no items."""
        return self._head is None

    def clear(self, deinit: Callable[[T], Any] | None = None) -> None:
        """Pop every item, top first, passing each to ``deinit`` if given."""
        while self._head is not None:
            item = self.pop()
            if deinit is not None:
                deinit(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"