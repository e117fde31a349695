"""Classic data structures: a dynamic array, stacks, a linked queue and a B-tree."""

__version__ = "1.0.0"
__all__ = ["basic_stack", "btree", "btree_node", "dynarray", "lqueue", "lstack", "vstack"]