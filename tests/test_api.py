"""Tests for the functional helpers and the testing fixture."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordtreelib import BSTree, BSTreeNode, build_tree, get_tree_stats, traverse
from wordtreelib.testing import TreeTestHelper


def test_build_tree_ignores_duplicates():
    tree = build_tree([5, 3, 5, 8, 3])
    assert tree.size() == 3
    assert traverse(tree) == [3, 5, 8]


def test_build_tree_with_key():
    tree = build_tree(["b", "A", "c", "a"], key=str.lower)
    assert traverse(tree) == ["A", "b", "c"]


def test_get_tree_stats():
    stats = get_tree_stats(build_tree([5, 3, 8, 1, 4]))
    assert stats['total_nodes'] == 5
    assert stats['leaf_nodes'] == 3
    assert stats['internal_nodes'] == 2
    assert stats['height'] == 3
    assert stats['depths'] == {0: 1, 1: 2, 2: 2}
    assert stats['min'] == 1
    assert stats['max'] == 8


def test_get_tree_stats_empty():
    stats = get_tree_stats(BSTree())
    assert stats['total_nodes'] == 0
    assert stats['height'] == 0
    assert stats['min'] is None
    assert stats['depths'] == {}


def test_helper_detects_broken_ordering():
    tree = build_tree([5, 3, 8])
    helper = TreeTestHelper(tree)
    assert helper.is_ordered()

    # Corrupt the tree by hand: 6 in the left subtree of 5
    tree.root.left.right = BSTreeNode(6)
    assert not helper.is_ordered()


def test_helper_detects_shared_nodes():
    tree = build_tree([5, 3, 8])
    helper = TreeTestHelper(tree)
    assert helper.is_strict_tree()

    tree.root.left.left = tree.root.right
    assert not helper.is_strict_tree()


def test_helper_summary_and_shape():
    helper = TreeTestHelper(build_tree([2, 1, 3]))
    assert helper.get_summary() == {'size': 3, 'height': 2, 'ordered': True, 'strict': True}
    assert helper.shape() == {
        'root': 2,
        'left': {'root': 1, 'left': None, 'right': None},
        'right': {'root': 3, 'left': None, 'right': None},
    }


def test_helper_on_empty_tree():
    helper = TreeTestHelper(BSTree())
    assert helper.shape() is None
    assert helper.is_ordered()
    assert helper.node_ids() == []


def test_node_basics():
    node = BSTreeNode(1, BSTreeNode(0), None)
    assert node.element == 1
    assert not node.is_leaf()
    assert [c.value for c in node.children()] == [0]
    assert repr(node) == "BSTreeNode(value=1)"
