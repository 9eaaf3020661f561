"""Snapshot traversal iterators for WordTreeLib.

Each iterator walks the tree once, at construction, and copies every value
into a list in its traversal order. Later mutation of the tree does not
affect an iterator that already exists. Iterators are single pass; ask
the tree for a new one to traverse again.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar, Union

from .node import BSTreeNode
from ..config import TraversalOrder

E = TypeVar("E")


class TreeIterator(ABC, Generic[E]):
    """Abstract base class for snapshot iterators.

    Subclasses implement ``_collect`` to produce the values of a subtree
    in their traversal order. Construction cost is proportional to tree
    size regardless of how much of the iterator is consumed.
    """

    def __init__(self, root: Optional[BSTreeNode[E]]):
        """Materialize the traversal of ``root``.

        Args:
            root: Root of the tree to snapshot (None for an empty tree)
        """
        self._elements: List[E] = self._collect(root) if root is not None else []
        self._index = 0

    @abstractmethod
    def _collect(self, root: BSTreeNode[E]) -> List[E]:
        """Return the values under ``root`` in traversal order."""
        pass

    def has_next(self) -> bool:
        """Check whether unread elements remain in the snapshot."""
        return self._index < len(self._elements)

    def __next__(self) -> E:
        if not self.has_next():
            raise StopIteration
        value = self._elements[self._index]
        self._index += 1
        return value

    next = __next__

    def __iter__(self) -> "TreeIterator[E]":
        return self

    def remaining(self) -> int:
        """Number of elements not yet returned."""
        return len(self._elements) - self._index

    def __len__(self) -> int:
        """Size of the snapshot, consumed or not."""
        return len(self._elements)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}"
                f"(size={len(self._elements)}, remaining={self.remaining()})")


class InOrderIterator(TreeIterator[E]):
    """In-order snapshot: left subtree, node, right subtree.

    For a binary search tree this is ascending key order.
    """

    def _collect(self, root: BSTreeNode[E]) -> List[E]:
        values: List[E] = []
        stack: List[BSTreeNode[E]] = []
        node: Optional[BSTreeNode[E]] = root

        while stack or node is not None:
            # Run down the left spine before emitting anything
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            values.append(node.value)
            node = node.right

        return values


class PreOrderIterator(TreeIterator[E]):
    """Pre-order snapshot: node before its subtrees.

    The first element is always the root's value.
    """

    def _collect(self, root: BSTreeNode[E]) -> List[E]:
        values: List[E] = []
        stack: List[BSTreeNode[E]] = [root]

        while stack:
            node = stack.pop()
            values.append(node.value)
            # Right pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

        return values


class PostOrderIterator(TreeIterator[E]):
    """Post-order snapshot: both subtrees before the node.

    The last element is always the root's value.
    """

    def _collect(self, root: BSTreeNode[E]) -> List[E]:
        # Node-right-left order reversed is left-right-node
        values: List[E] = []
        stack: List[BSTreeNode[E]] = [root]

        while stack:
            node = stack.pop()
            values.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)

        values.reverse()
        return values


_ITERATORS = {
    TraversalOrder.IN_ORDER: InOrderIterator,
    TraversalOrder.PRE_ORDER: PreOrderIterator,
    TraversalOrder.POST_ORDER: PostOrderIterator,
}


def create_iterator(order: Union[TraversalOrder, str],
                    root: Optional[BSTreeNode[E]]) -> TreeIterator[E]:
    """Create a snapshot iterator by traversal order.

    Args:
        order: TraversalOrder or its name ('inorder', 'preorder', 'postorder')
        root: Root node to snapshot (None for an empty tree)

    Returns:
        TreeIterator over the snapshot

    Raises:
        ValueError: If the order name is not recognized
    """
    return _ITERATORS[TraversalOrder.parse(order)](root)
