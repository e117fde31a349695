# dskit

A small collection of classic container types for Python 3.10 and later,
with no dependencies outside the standard library.

## Contents

| Module              | Names                                                       | What it is                                                   |
|---------------------|-------------------------------------------------------------|--------------------------------------------------------------|
| `dskit.dynarray`    | `DynArray`                                                  | A growable array with an explicit capacity and optional `copy` |
| `dskit.basic_stack` | `BoundedStack`                                              | A stack whose capacity is fixed at creation                  |
| `dskit.vstack`      | `VectorStack`, `StackEmptyError`                            | An array-backed stack that stores and hands out copies       |
| `dskit.lstack`      | `LinkedStack`                                               | A singly linked stack that holds references                  |
| `dskit.lqueue`      | `LinkedQueue`                                               | A singly linked FIFO queue with a rear pointer               |
| `dskit.btree_node`  | `BTreeNode`, `Entry`, `borrow_from_left`, `borrow_from_right`, `merge_children` | B-tree nodes and the rebalancing steps on them |
| `dskit.btree`       | `BTree`, `DuplicateKeyError`                                | A B-tree of unique items with a configurable order           |

## Installation

```
pip install .
```

With the test tools:

```
pip install .[test]
```

## Usage

### DynArray

```python
from dskit.dynarray import DynArray

arr = DynArray(capacity=2, copy=list)
arr.append([1])
arr.insert(1, [[2], [3]])
assert list(arr) == [[1], [2], [3]]
assert arr.capacity() >= 3
arr.delete(0, 1)
assert arr.front() == [2] and arr.back() == [3]
arr.resize(4, default=[0])
assert arr[-1] == [0]
```

Every stored object passes through `copy` (when given). If `copy` raises
during `insert`, nothing is inserted. Capacity grows by doubling (or to the
size needed, if larger); `reserve` never shrinks it and `shrink_to_fit`
reduces it to the current length, but not below 1. `clear` keeps the
capacity. Out-of-range indices raise `IndexError`; `pop` on an empty array
raises `IndexError`. `front()` and `back()` return `None` when empty.

### BoundedStack

```python
from dskit.basic_stack import BoundedStack

stack = BoundedStack(2)
stack.push("a")
stack.push("b")
assert stack.top() == "b"
assert stack.pop() == "b"
```

`push` raises `OverflowError` when the stack is full; `pop` and `top` raise
`IndexError` when it is empty.

### VectorStack

```python
from dskit.vstack import VectorStack, StackEmptyError

stack = VectorStack(copy=dict)
stack.push({"value": 1})
stack.push({"value": 2})
assert stack.top() == {"value": 2}
assert stack.pop() == {"value": 2}
assert len(stack) == 1
```

Pushed items are stored as copies, and `pop()` and `top()` return fresh
copies. Without `copy`, items are stored and returned as they are.
Iteration runs from bottom to top. `pop()` and `top()` raise
`StackEmptyError` (a subclass of `IndexError`) when the stack is empty.

### LinkedStack

```python
from dskit.lstack import LinkedStack

stack = LinkedStack()
stack.push("a")
stack.push("b")
assert list(stack) == ["b", "a"]

released = []
stack.clear(deinit=released.append)
assert released == ["b", "a"] and stack.empty()
```

Iteration runs from top to bottom. `pop()` and `top()` raise
`StackEmptyError` when the stack is empty.

### LinkedQueue

```python
from dskit.lqueue import LinkedQueue

queue = LinkedQueue()
for n in (1, 2, 3):
    queue.enqueue(n)
assert queue.front() == 1 and queue.rear() == 3
assert queue.dequeue() == 1
assert list(queue) == [2, 3]
```

`dequeue`, `front` and `rear` raise `IndexError` when the queue is empty.
`clear(deinit)` removes items front first, passing each to `deinit`.

### BTree

```python
from dskit.btree import BTree, DuplicateKeyError

tree = BTree(order=4)
for key in (5, 1, 9, 3):
    tree.add(key)
assert list(tree) == [1, 3, 5, 9]
assert 3 in tree
assert tree.remove(3) == 3
assert tree.search(3) is None
```

Each node holds at most `order - 1` items; `order` must be at least 3.
`compare(stored, key)` is optional and must return a negative, zero or
positive number; by default the items' own ordering is used. `add` raises
`DuplicateKeyError` for an item already stored, and `remove` raises
`KeyError` for an item that is not. Iteration yields items in ascending
order. `clear(deinit)` passes every item to `deinit`, the items of each node
after those of its children.

`dskit.btree_node` exposes the node type used by the tree: `BTreeNode`
(`search`, `insert`, `split`, `remove`, `child_at`, `is_leaf`) and the
functions `borrow_from_left`, `borrow_from_right` and `merge_children`,
which act on a parent node and one of its separator positions.

## What the package does not do

All containers live in memory only: nothing is saved to or loaded from
disk. None of them is safe for concurrent use without outside locking.
There is no priority queue and no command-line tool.

## Running the tests

```
pytest
```