"""Nodes of a B-tree and the rebalancing steps that act on them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

Compare = Callable[[Any, Any], int]


@dataclass
class Entry:
    """A stored item together with the child holding the larger items.

    ``child`` covers the items greater than ``data`` and smaller than the
    next entry's ``data`` in the same node.
    """

    data: Any
    child: Optional["BTreeNode"] = None


class BTreeNode:
    """A B-tree node with a fixed capacity of entries.

    ``first_child`` covers the items smaller than the first entry.  Child
    positions are numbered ``-1`` for ``first_child`` and ``0 .. len - 1``
    for the child of each entry.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("node capacity must be at least 1")
        self.capacity = capacity
        self.entries: list[Entry] = []
        self.first_child: BTreeNode | None = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.first_child is None

    def child_at(self, index: int) -> BTreeNode | None:
        """Child at position ``index``; ``-1`` is the first child."""
        if index == -1:
            return self.first_child
        if not 0 <= index < len(self.entries):
            raise IndexError("child position out of range")
        return self.entries[index].child

    def search(self, key: Any, compare: Compare) -> tuple[bool, int]:
        """Binary search for ``key``.

        Returns ``(True, i)`` when entry ``i`` holds ``key``, otherwise
        ``(False, c)`` where ``c`` is the child position to descend into.
        ``compare(stored, key)`` is negative, zero or positive as the stored
        item is smaller than, equal to or larger than ``key``.
        """
        low, high = 0, len(self.entries) - 1
        while low <= high:
            mid = (low + high) // 2
            result = compare(self.entries[mid].data, key)
            if result == 0:
                return True, mid
            if result > 0:
                high = mid - 1
            else:
                low = mid + 1
        return False, low - 1

    def insert(self, index: int, entry: Entry) -> Entry | None:
        """Insert ``entry`` at ``index``.

        Returns ``None`` when it fits.  When the node is already full, the
        entry that no longer fits is returned instead: the former last
        entry, or ``entry`` itself when it belongs at the end.
        """
        size = len(self.entries)
        if not 0 <= index <= size:
            raise IndexError("insertion index out of range")
        if size < self.capacity:
            self.entries.insert(index, entry)
            return None
        if index >= size:
            return entry
        overflow = self.entries.pop()
        self.entries.insert(index, entry)
        return overflow

    def split(self, overflow: Entry) -> Entry:
        """Split a full node around its median.

        The entries after the median, followed by ``overflow``, move to a
        new sibling node.  The median is returned with its child set to
        that sibling, ready to be inserted into the parent.
        """
        if len(self.entries) != self.capacity:
            raise ValueError("only a full node can be split")
        median_index = self.capacity // 2
        median = self.entries[median_index]
        sibling = BTreeNode(self.capacity)
        sibling.entries = self.entries[median_index + 1 :] + [overflow]
        sibling.first_child = median.child
        del self.entries[median_index:]
        return Entry(median.data, sibling)

    def remove(self, index: int) -> Any:
        """Remove the entry at ``index`` and return its data."""
        if not 0 <= index < len(self.entries):
            raise IndexError("entry index out of range")
        return self.entries.pop(index).data

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        items = [entry.data for entry in self.entries]
        return f"BTreeNode({items!r}, capacity={self.capacity})"


def _sibling_pair(parent: BTreeNode, index: int) -> tuple[BTreeNode, BTreeNode]:
    if not 0 <= index < len(parent.entries):
        raise IndexError("separator index out of range")
    left = parent.child_at(index - 1)
    right = parent.entries[index].child
    if left is None or right is None:
        raise ValueError("separator has no children on both sides")
    return left, right


def borrow_from_left(parent: BTreeNode, index: int) -> None:
    """Rotate right through separator ``index`` of ``parent``.

    The left sibling's largest entry moves up to the parent, and the old
    separator moves down to the front of the right sibling.
    """
    donor, starving = _sibling_pair(parent, index)
    if not donor.entries:
        raise ValueError("left sibling has no entry to lend")
    separator = parent.entries[index]
    starving.entries.insert(0, Entry(separator.data, starving.first_child))
    last = donor.entries.pop()
    separator.data = last.data
    starving.first_child = last.child


def borrow_from_right(parent: BTreeNode, index: int) -> None:
    """Rotate left through separator ``index`` of ``parent``.

    The right sibling's smallest entry moves up to the parent, and the old
    separator moves down to the end of the left sibling.
    """
    starving, donor = _sibling_pair(parent, index)
    if not donor.entries:
        raise ValueError("right sibling has no entry to lend")
    separator = parent.entries[index]
    starving.entries.append(Entry(separator.data, donor.first_child))
    first = donor.entries.pop(0)
    separator.data = first.data
    donor.first_child = first.child


def merge_children(parent: BTreeNode, index: int) -> None:
    """Merge the children around separator ``index`` into the left one.

    The separator moves down between the two siblings' entries and is
    removed from ``parent`` along with the right sibling.
    """
    left, right = _sibling_pair(parent, index)
    left.entries.append(Entry(parent.entries[index].data, right.first_child))
    left.entries.extend(right.entries)
    parent.remove(index)