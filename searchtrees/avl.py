"""A self-balancing AVL tree built on the plain binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from searchtrees.bst import BinarySearchTree, Node


@dataclass(eq=False)
class AVLNode(Node):
    """A tree node that also records the height of its subtree."""

    height: int = 1


def _height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return node.height  # type: ignore[attr-defined]


def _refresh_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


class AVLTree(BinarySearchTree):
    """A binary search tree that keeps itself height-balanced."""

    def _make_node(self, key: Any, value: Any) -> AVLNode:
        return AVLNode(key, value)

    # ------------------------------------------------------------------
    # Mutation

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value`` and rebalance; an existing key gets the new value."""
        existing = self.find(key)
        if existing is not None:
            existing.value = value
            return
        super().insert(key, value)
        node = self.find(key)
        assert node is not None
        self._update_heights(node.parent)
        self._rebalance(node)

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present and restore balance along the affected paths."""
        node = self.find(key)
        if node is None:
            return
        parent = self._detach(node)
        self._rebalance(parent)
        root = self._root
        if root is None:
            return
        far_left = self._furthest_down(root.left) if root.left is not None else root
        far_right = self._furthest_down(root.right) if root.right is not None else root
        self._rebalance(far_left)
        self._rebalance(far_right)

    # ------------------------------------------------------------------
    # Queries

    def is_balanced_tree(self) -> bool:
        """Return True if, by the recorded heights, every node is balanced."""
        return self._balanced_by_heights(self._root)

    @classmethod
    def _balanced_by_heights(cls, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if abs(_height(node.left) - _height(node.right)) > 1:
            return False
        return cls._balanced_by_heights(node.left) and cls._balanced_by_heights(node.right)

    # ------------------------------------------------------------------
    # Helpers

    def _swap_nodes(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        super()._swap_nodes(n1, n2)
        if n1 is None or n2 is None or n1 is n2:
            return
        n1.height, n2.height = n2.height, n1.height  # type: ignore[attr-defined]

    @staticmethod
    def _update_heights(node: Optional[Node]) -> None:
        while node is not None:
            _refresh_height(node)  # type: ignore[arg-type]
            node = node.parent

    def _furthest_down(self, node: Optional[Node]) -> Optional[Node]:
        """Follow the taller child (left on ties) down to a leaf."""
        if node is None:
            return None
        while node.left is not None or node.right is not None:
            if _height(node.left) >= _height(node.right):
                node = node.left
            else:
                node = node.right
        return node

    def _rotate_right(self, node: AVLNode) -> None:
        pivot = node.left
        if pivot is None:
            return
        parent = node.parent
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
        node.parent = pivot
        self._replace_child(parent, node, pivot)
        _refresh_height(node)
        _refresh_height(pivot)  # type: ignore[arg-type]

    def _rotate_left(self, node: AVLNode) -> None:
        pivot = node.right
        if pivot is None:
            return
        parent = node.parent
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
        node.parent = pivot
        self._replace_child(parent, node, pivot)
        _refresh_height(node)
        _refresh_height(pivot)  # type: ignore[arg-type]

    def _replace_child(self, parent: Optional[Node], old: Node, new: Node) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        new.parent = parent

    def _rebalance(self, node: Optional[Node]) -> None:
        """Walk from ``node`` to the root, rotating wherever a node is out of balance."""
        while node is not None:
            factor = _height(node.left) - _height(node.right)
            if factor > 1:
                left = node.left
                assert left is not None
                if _height(left.left) >= _height(left.right):
                    self._rotate_right(node)  # type: ignore[arg-type]
                else:
                    self._rotate_left(left)  # type: ignore[arg-type]
                    self._rotate_right(node)  # type: ignore[arg-type]
            elif factor < -1:
                right = node.right
                assert right is not None
                if _height(right.right) >= _height(right.left):
                    self._rotate_left(node)  # type: ignore[arg-type]
                else:
                    self._rotate_right(right)  # type: ignore[arg-type]
                    self._rotate_left(node)  # type: ignore[arg-type]
            _refresh_height(node)  # type: ignore[arg-type]
            node = node.parent