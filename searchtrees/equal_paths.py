"""Check whether every leaf of a binary tree lies at the same depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A plain binary tree node with an integer key."""

    key: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def subtree_height(node: Optional[TreeNode]) -> int:
    """Number of nodes on the longest downward path from ``node``."""
    if node is None:
        return 0
    return 1 + max(subtree_height(node.left), subtree_height(node.right))


def equal_paths(root: Optional[TreeNode]) -> bool:
    """Return True if all root-to-leaf paths have the same length."""
    if root is None:
        return True
    if root.right is None and root.left is not None and subtree_height(root.left) == 1:
        return True
    if root.left is None and root.right is not None and subtree_height(root.right) == 1:
        return True
    return subtree_height(root.left) == subtree_height(root.right)