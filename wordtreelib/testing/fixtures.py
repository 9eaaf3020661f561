"""Test fixtures for WordTreeLib consumers.

These helpers give test suites a stable way to check tree structure
without reaching into private attributes.
"""

from typing import Any, Dict, List, Optional

from ..core import BSTree, BSTreeNode


class TreeTestHelper:
    """Structural checks for a BSTree.

    Example:
        helper = TreeTestHelper(tracker.tree)
        assert helper.is_ordered()
        assert helper.shape()["root"] == "m"
    """

    def __init__(self, tree: BSTree):
        """
        Args:
            tree: Tree under test
        """
        self._tree = tree

    def _root(self) -> Optional[BSTreeNode]:
        return None if self._tree.is_empty() else self._tree.root

    def _key(self, value: Any) -> Any:
        # Compare the way the tree does, including an injected key function
        key = self._tree.key
        return key(value) if key is not None else value

    def is_ordered(self) -> bool:
        """Check the ordering invariant on every node.

        Each value must lie strictly between the bounds inherited from its
        ancestors.
        """
        root = self._root()
        if root is None:
            return True

        stack = [(root, None, None)]
        while stack:
            node, low, high = stack.pop()
            key = self._key(node.value)
            if low is not None and not low < key:
                return False
            if high is not None and not key < high:
                return False
            if node.left is not None:
                stack.append((node.left, low, key))
            if node.right is not None:
                stack.append((node.right, key, high))
        return True

    def node_ids(self) -> List[int]:
        """Identity of every reachable node (each must appear once)."""
        root = self._root()
        if root is None:
            return []
        ids = []
        stack = [root]
        while stack:
            node = stack.pop()
            ids.append(id(node))
            stack.extend(node.children())
        return ids

    def is_strict_tree(self) -> bool:
        """Check that no node is linked from two places."""
        ids = self.node_ids()
        return len(ids) == len(set(ids))

    def shape(self) -> Optional[Dict[str, Any]]:
        """Nested dict of the tree shape: {'root', 'left', 'right'}.

        Only suitable for small trees.
        """
        def _shape(node):
            if node is None:
                return None
            return {
                'root': node.value,
                'left': _shape(node.left),
                'right': _shape(node.right),
            }
        return _shape(self._root())

    def get_summary(self) -> Dict[str, Any]:
        """High-level state for assertions."""
        return {
            'size': self._tree.size(),
            'height': self._tree.height(),
            'ordered': self.is_ordered(),
            'strict': self.is_strict_tree(),
        }
