"""Binary search tree container for WordTreeLib.

BSTree stores values of any totally ordered type. It keeps the usual
ordering invariant (left subtree < node < right subtree) and rejects
duplicate keys. No rebalancing is ever performed.

Descent and traversal are written as loops rather than recursion so that
degenerate trees (for example, words inserted in sorted order) work at
any height.
"""

from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar, Union

from .exceptions import EmptyTreeError, NullEntryError
from .iterator import (
    TreeIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    create_iterator,
)
from .node import BSTreeNode
from ..config import TraversalOrder

E = TypeVar("E")


class BSTree(Generic[E]):
    """Unbalanced binary search tree with snapshot iterators.

    Values are compared with ``<`` and ``==``. A ``key`` callable may be
    given to compare ``key(value)`` instead, in the same way as
    ``sorted(key=...)``.

    Example:
        tree = BSTree()
        for n in (5, 3, 8, 1, 4):
            tree.add(n)
        list(tree.inorder_iterator())   # [1, 3, 4, 5, 8]

    Not thread-safe: callers must serialize access to a shared instance,
    including iterator construction.
    """

    def __init__(self, root_value: Optional[E] = None,
                 key: Optional[Callable[[E], Any]] = None):
        """Create a tree, optionally seeded with a root value.

        Args:
            root_value: Value to store at the root (None for an empty tree)
            key: Optional function extracting the comparison key
        """
        self._key = key
        self._root: Optional[BSTreeNode[E]] = None
        if root_value is not None:
            self._root = BSTreeNode(root_value)

    # ------------------------------------------------------------------
    # Structure queries
    # ------------------------------------------------------------------

    @property
    def key(self) -> Optional[Callable[[E], Any]]:
        """The key function used for comparisons, or None."""
        return self._key

    @property
    def root(self) -> BSTreeNode[E]:
        """The root node.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("root node is None")
        return self._root

    def is_empty(self) -> bool:
        """Check if the tree holds no values."""
        return self._root is None

    def size(self) -> int:
        """Count every node in the tree (0 when empty)."""
        if self._root is None:
            return 0

        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children())
        return count

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self._root is not None

    def height(self) -> int:
        """Height of the tree counted in levels.

        An empty tree has height 0 and a single node has height 1; each
        level below the root adds one.
        """
        if self._root is None:
            return 0

        height = 0
        level = [self._root]
        while level:
            height += 1
            level = [child for node in level for child in node.children()]
        return height

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _compare(self, a: E, b: E) -> int:
        """Three-way comparison honoring the key function."""
        if self._key is not None:
            a, b = self._key(a), self._key(b)
        if a < b:
            return -1
        if a == b:
            return 0
        return 1

    def search(self, entry: E) -> Optional[BSTreeNode[E]]:
        """Find the node holding a value equal to ``entry``.

        Args:
            entry: Probe value; only its ordering key matters

        Returns:
            The matching node, or None if no such value is stored

        Raises:
            NullEntryError: If entry is None
        """
        if entry is None:
            raise NullEntryError("entry is None")

        node = self._root
        while node is not None:
            comparison = self._compare(entry, node.value)
            if comparison == 0:
                return node
            node = node.left if comparison < 0 else node.right
        return None

    def contains(self, entry: E) -> bool:
        """Check if a value equal to ``entry`` is stored.

        Raises:
            NullEntryError: If entry is None
        """
        return self.search(entry) is not None

    def __contains__(self, entry: E) -> bool:
        return self.contains(entry)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, entry: E) -> bool:
        """Insert ``entry`` as a new leaf.

        Args:
            entry: Value to insert

        Returns:
            True if inserted, False if an equal value is already stored
            (the tree is left unchanged)

        Raises:
            NullEntryError: If entry is None
        """
        if entry is None:
            raise NullEntryError("entry is None")

        if self._root is None:
            self._root = BSTreeNode(entry)
            return True

        node = self._root
        while True:
            comparison = self._compare(entry, node.value)
            if comparison == 0:
                return False
            if comparison < 0:
                if node.left is None:
                    node.left = BSTreeNode(entry)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTreeNode(entry)
                    return True
                node = node.right

    def remove_min(self) -> Optional[BSTreeNode[E]]:
        """Detach and return the node holding the smallest value.

        The removed node's right subtree takes its place.

        Returns:
            The removed node (with no children), or None if the tree is empty
        """
        if self._root is None:
            return None

        parent: Optional[BSTreeNode[E]] = None
        node = self._root
        while node.left is not None:
            parent, node = node, node.left

        if parent is None:
            self._root = node.right
        else:
            parent.left = node.right
        node.right = None
        return node

    def remove_max(self) -> Optional[BSTreeNode[E]]:
        """Detach and return the node holding the largest value.

        The removed node's left subtree takes its place.

        Returns:
            The removed node (with no children), or None if the tree is empty
        """
        if self._root is None:
            return None

        parent: Optional[BSTreeNode[E]] = None
        node = self._root
        while node.right is not None:
            parent, node = node, node.right

        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left
        node.left = None
        return node

    def clear(self) -> None:
        """Discard every node."""
        self._root = None

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def inorder_iterator(self) -> TreeIterator[E]:
        """Snapshot iterator in ascending key order."""
        return InOrderIterator(self._root)

    def preorder_iterator(self) -> TreeIterator[E]:
        """Snapshot iterator visiting each node before its children."""
        return PreOrderIterator(self._root)

    def postorder_iterator(self) -> TreeIterator[E]:
        """Snapshot iterator visiting each node after its children."""
        return PostOrderIterator(self._root)

    def iterator(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> TreeIterator[E]:
        """Snapshot iterator for the given traversal order."""
        return create_iterator(order, self._root)

    def __iter__(self) -> Iterator[E]:
        return self.inorder_iterator()

    # ------------------------------------------------------------------
    # Pickling
    # ------------------------------------------------------------------

    def __getstate__(self):
        # Store a flat pre-order list; re-adding it in that order rebuilds
        # the identical shape without recursing through nested nodes.
        values: List[E] = list(self.preorder_iterator())
        return {"key": self._key, "values": values}

    def __setstate__(self, state):
        self._key = state["key"]
        self._root = None
        for value in state["values"]:
            self.add(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size()}, height={self.height()})"
