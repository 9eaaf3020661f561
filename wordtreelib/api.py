"""High-level API for WordTreeLib.

Simple functional helpers around BSTree for common cases.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar, Union

from .config import TraversalOrder
from .core import BSTree

E = TypeVar("E")


def build_tree(values: Iterable[E], key: Optional[Callable[[E], Any]] = None) -> BSTree:
    """Build a tree by adding ``values`` in order.

    Duplicates after the first are ignored, just as ``BSTree.add`` does.

    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4])
        >>> traverse(tree, "preorder")
        [5, 3, 1, 4, 8]
    """
    tree = BSTree(key=key)
    for value in values:
        tree.add(value)
    return tree


def traverse(tree: BSTree, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> List:
    """Return the snapshot for ``order`` as a list."""
    return list(tree.iterator(order))


def get_tree_stats(tree: BSTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        min and max values and the number of nodes at each depth
        (root at depth 0)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': tree.height(),
        'depths': {},
        'min': None,
        'max': None,
    }

    if tree.is_empty():
        stats['internal_nodes'] = 0
        return stats

    level = [tree.root]
    depth = 0
    while level:
        stats['depths'][depth] = len(level)
        stats['total_nodes'] += len(level)
        stats['leaf_nodes'] += sum(1 for node in level if node.is_leaf())
        level = [child for node in level for child in node.children()]
        depth += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    node = tree.root
    while node.left is not None:
        node = node.left
    stats['min'] = node.value

    node = tree.root
    while node.right is not None:
        node = node.right
    stats['max'] = node.value

    return stats
