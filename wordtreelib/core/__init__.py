"""Core data structures for WordTreeLib.

This module contains the binary search tree, its node type and the
snapshot iterators it hands out.
"""

from .exceptions import TreeError, NullEntryError, EmptyTreeError
from .node import BSTreeNode
from .iterator import (
    TreeIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    create_iterator,
)
from .tree import BSTree

__all__ = [
    "BSTree",
    "BSTreeNode",
    "TreeIterator",
    "InOrderIterator",
    "PreOrderIterator",
    "PostOrderIterator",
    "create_iterator",
    "TreeError",
    "NullEntryError",
    "EmptyTreeError",
]
