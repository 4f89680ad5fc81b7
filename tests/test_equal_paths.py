import pytest

from searchtrees.equal_paths import TreeNode, equal_paths, subtree_height


def test_single_node():
    assert equal_paths(TreeNode(1)) is True


def test_left_leaf_only():
    assert equal_paths(TreeNode(1, TreeNode(2))) is True


def test_two_leaves():
    assert equal_paths(TreeNode(1, TreeNode(2), TreeNode(3))) is True


def test_right_leaf_only():
    assert equal_paths(TreeNode(1, None, TreeNode(3))) is True


def test_uneven_leaves():
    root = TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3))
    assert equal_paths(root) is False


def test_empty_tree():
    assert equal_paths(None) is True


def test_single_deep_chain_is_not_equal():
    root = TreeNode(1, TreeNode(2, TreeNode(3)))
    assert equal_paths(root) is False


def test_equal_depth_subtrees():
    root = TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3, None, TreeNode(5)))
    assert equal_paths(root) is True


@pytest.mark.parametrize(
    "node, height",
    [
        (None, 0),
        (TreeNode(1), 1),
        (TreeNode(1, TreeNode(2)), 2),
        (TreeNode(1, TreeNode(2), TreeNode(3, None, TreeNode(4))), 3),
    ],
)
def test_subtree_height(node, height):
    assert subtree_height(node) == height


def test_height_grows_by_one_per_parent():
    node = TreeNode(0)
    for key in range(1, 8):
        below = subtree_height(node)
        node = TreeNode(key, node if key % 2 else None, None if key % 2 else node)
        assert subtree_height(node) == below + 1