"""Stack stored in a contiguous, growable array."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from dskit.dynarray import DynArray

T = TypeVar("T")

_INITIAL_CAPACITY = 2


class StackEmptyError(IndexError):
    """Raised when an item is requested from an empty stack."""


class VectorStack(Generic[T]):
    """LIFO stack that owns copies of its items.

    Each pushed item goes through ``copy`` before it is stored, and each
    item handed back by :meth:`pop` or :meth:`top` is a fresh copy of
    the stored one.  If ``copy`` raises, the stack is left unchanged.
    Without ``copy`` items are stored and returned as they are.
    """

    def __init__(self, copy: Callable[[T], T] | None = None) -> None:
        self._copy = copy
        self._contents: DynArray[T] = DynArray(_INITIAL_CAPACITY, copy)

    def _hand_out(self, item: T) -> T:
        if self._copy is None:
            return item
        return self._copy(item)

    def push(self, item: T) -> None:
        """Store a copy of ``item`` on top of the stack."""
        self._contents.append(item)

    def pop(self) -> T:
        """Remove the top item and return a copy of it."""
        if not self._contents:
            raise StackEmptyError("pop from empty stack")
        result = self._hand_out(self._contents[-1])
        self._contents.pop()
        return result

    def top(self) -> T:
        """Return a copy of the top item without removing it."""
        if not self._contents:
            raise StackEmptyError("top of empty stack")
        return self._hand_out(self._contents[-1])

    def empty(self) -> bool:
        """True when the stack holds no items."""
        return len(self._contents) == 0

    def __len__(self) -> int:
        return len(self._contents)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the stored items from bottom to top."""
        return iter(self._contents)

    def __repr__(self) -> str:
        return f"VectorStack({list(self._contents)!r})"