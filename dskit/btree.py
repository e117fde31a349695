"""B-tree of ordered items with a caller-supplied comparison."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from dskit.btree_node import (
    BTreeNode,
    Compare,
    Entry,
    borrow_from_left,
    borrow_from_right,
    merge_children,
)

T = TypeVar("T")


class DuplicateKeyError(ValueError):
    """Raised when an item equal to one already stored is added."""


def _natural_compare(stored: Any, key: Any) -> int:
    return (stored > key) - (stored < key)


class BTree(Generic[T]):
    """A B-tree of a given order holding references to the caller's items.

    ``compare(stored, key)`` is negative, zero or positive as the stored
    item is smaller than, equal to or larger than ``key``.  Equal items are
    not allowed.  Each node holds at most ``order - 1`` items.
    """

    def __init__(self, order: int, compare: Compare | None = None) -> None:
        if order < 3:
            raise ValueError("B-tree order must be at least 3")
        self._order = order
        self._compare: Compare = compare if compare is not None else _natural_compare
        self._root = BTreeNode(order - 1)
        self._size = 0

    def order(self) -> int:
        """Maximum number of children of a node."""
        return self._order

    @property
    def _min_entries(self) -> int:
        return (self._order + 1) // 2 - 1

    def add(self, data: T) -> None:
        """Insert ``data``; raises :class:`DuplicateKeyError` if it is present."""
        path: list[tuple[BTreeNode, int]] = []
        node: BTreeNode | None = self._root
        while node is not None:
            found, position = node.search(data, self._compare)
            if found:
                raise DuplicateKeyError(f"item already stored: {data!r}")
            path.append((node, position))
            node = node.child_at(position)

        pending: Entry | None = Entry(data)
        while path and pending is not None:
            node, position = path.pop()
            overflow = node.insert(position + 1, pending)
            pending = None if overflow is None else node.split(overflow)

        if pending is not None:
            new_root = BTreeNode(self._order - 1)
            new_root.first_child = self._root
            new_root.entries.append(pending)
            self._root = new_root
        self._size += 1

    def remove(self, data: Any) -> T:
        """Remove the item equal to ``data`` and return the stored item.

        Raises ``KeyError`` when no such item is stored.
        """
        path: list[tuple[BTreeNode, int]] = []
        node: BTreeNode | None = self._root
        while node is not None:
            found, position = node.search(data, self._compare)
            if found:
                break
            path.append((node, position))
            node = node.child_at(position)
        else:
            raise KeyError(data)

        result = node.entries[position].data
        if node.is_leaf():
            index = position
        else:
            target, target_index = node, position
            path.append((node, position - 1))
            leaf = node.child_at(position - 1)
            assert leaf is not None
            while not leaf.is_leaf():
                last = len(leaf) - 1
                path.append((leaf, last))
                leaf = leaf.child_at(last)
                assert leaf is not None
            index = len(leaf) - 1
            target.entries[target_index].data = leaf.entries[index].data
            node = leaf

        node.remove(index)
        self._rebalance(node, path)

        if len(self._root) == 0 and self._root.first_child is not None:
            self._root = self._root.first_child
        self._size -= 1
        return result

    def _rebalance(self, node: BTreeNode, path: list[tuple[BTreeNode, int]]) -> None:
        minimum = self._min_entries
        while path and len(node) < minimum:
            parent, position = path.pop()
            if position != -1:
                left = parent.child_at(position - 1)
                if left is not None and len(left) > minimum:
                    borrow_from_left(parent, position)
                    return
            if position != len(parent) - 1:
                right = parent.child_at(position + 1)
                if right is not None and len(right) > minimum:
                    borrow_from_right(parent, position + 1)
                    return
            merge_children(parent, max(position, 0))
            node = parent

    def _find(self, data: Any) -> tuple[bool, Any]:
        node: BTreeNode | None = self._root
        while node is not None:
            found, position = node.search(data, self._compare)
            if found:
                return True, node.entries[position].data
            node = node.child_at(position)
        return False, None

    def search(self, data: Any) -> T | None:
        """Return the stored item equal to ``data``, or ``None``."""
        return self._find(data)[1]

    def clear(self, deinit: Callable[[T], Any] | None = None) -> None:
        """Remove every item, passing each to ``deinit`` if given.

        Items of a node are handed over after those of its children.
        """
        if deinit is not None:
            for item in _post_order(self._root):
                deinit(item)
        self._root = BTreeNode(self._order - 1)
        self._size = 0

    def __contains__(self, data: Any) -> bool:
        return self._find(data)[0]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate over the items in ascending order."""
        return _in_order(self._root)

    def __repr__(self) -> str:
        return f"BTree({list(self)!r}, order={self._order})"


def _in_order(node: BTreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _in_order(node.first_child)
    for entry in node.entries:
        yield entry.data
        yield from _in_order(entry.child)


def _post_order(node: BTreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _post_order(node.first_child)
    for entry in node.entries:
        yield from _post_order(entry.child)
    for entry in node.entries:
        yield entry.data