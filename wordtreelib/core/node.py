"""BSTreeNode abstraction for WordTreeLib.

The node is intentionally kept simple - it's a data container with two
child slots. Ordering is the tree's job; a node never checks where its
value belongs.
"""

from typing import Generic, Iterator, Optional, TypeVar

E = TypeVar("E")


class BSTreeNode(Generic[E]):
    """A single vertex of a binary search tree.

    Each node exclusively owns its children: a node is only ever linked
    from one parent slot (or from the tree as its root).

    Callers holding a node returned by ``BSTree.search`` may mutate the
    non-key parts of ``value`` in place. Changing the ordering key of a
    stored value is not supported and silently breaks the tree.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: E,
                 left: Optional["BSTreeNode[E]"] = None,
                 right: Optional["BSTreeNode[E]"] = None):
        """Create a node.

        Args:
            value: Payload stored in this node
            left: Optional left child (all smaller values)
            right: Optional right child (all larger values)
        """
        self.value = value
        self.left = left
        self.right = right

    @property
    def element(self) -> E:
        """Alias for ``value``."""
        return self.value

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator["BSTreeNode[E]"]:
        """Yield the present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.value!r})"
