"""Growable array that owns copies of the objects stored in it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar, overload

T = TypeVar("T")


class DynArray(Generic[T]):
    """A vector-like array with an explicit capacity.

    Every object placed in the array goes through ``copy`` first, so the
    array owns its slots.  ``copy`` may raise to refuse an object; the
    array is then left as it was.  Without ``copy`` objects are stored
    as given.
    """

    def __init__(
        self, capacity: int = 2, copy: Callable[[T], T] | None = None
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._copy = copy
        self._items: list[T] = []

    def _own(self, item: T) -> T:
        if self._copy is None:
            return item
        return self._copy(item)

    def _grow_for(self, extra: int) -> None:
        needed = len(self._items) + extra
        if needed > self._capacity:
            self._capacity = max(self._capacity * 2, needed)

    def _check_index(self, index: int) -> int:
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("dynarray index out of range")
        return index

    def insert(self, index: int, items: Iterable[T]) -> None:
        """Insert copies of ``items`` before ``index`` (0 to ``len``).

        Either every item is inserted or, if a copy fails, none is.
        """
        if not 0 <= index <= len(self._items):
            raise IndexError("insertion index out of range")
        copies = [self._own(item) for item in list(items)]
        self._grow_for(len(copies))
        self._items[index:index] = copies

    def append(self, item: T) -> None:
        """Add a copy of ``item`` at the end."""
        self.insert(len(self._items), (item,))

    def delete(self, begin: int, end: int) -> None:
        """Remove the items in ``[begin, end)``."""
        if not 0 <= begin <= end <= len(self._items):
            raise IndexError("delete range out of bounds")
        del self._items[begin:end]

    def pop(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty dynarray")
        return self._items.pop()

    def reserve(self, new_capacity: int) -> None:
        """Ensure room for ``new_capacity`` items; never shrinks."""
        if new_capacity > self._capacity:
            self._capacity = new_capacity

    def shrink_to_fit(self) -> None:
        """Drop unused capacity, keeping room for at least one item."""
        self._capacity = max(len(self._items), 1)

    def clear(self) -> None:
        """Remove every item but keep the capacity."""
        self._items.clear()

    def resize(self, new_size: int, default: T | None = None) -> None:
        """Truncate, or pad with copies of ``default``, to ``new_size`` items."""
        if new_size < 0:
            raise ValueError("size cannot be negative")
        size = len(self._items)
        if new_size <= size:
            del self._items[new_size:]
            return
        padding = [self._own(default) for _ in range(new_size - size)]  # type: ignore[arg-type]
        self._grow_for(len(padding))
        self._items.extend(padding)

    def front(self) -> T | None:
        """First item, or ``None`` when empty."""
        return self._items[0] if self._items else None

    def back(self) -> T | None:
        """Last item, or ``None`` when empty."""
        return self._items[-1] if self._items else None

    def capacity(self) -> int:
        """Number of items the array holds before it has to grow."""
        return self._capacity

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return self._items[index]
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        position = self._check_index(index)
        self._items[position] = self._own(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r}, capacity={self._capacity})"