"""An unbalanced binary search tree mapping ordered keys to values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding a key, a value and links to its neighbours."""

    key: Any
    value: Any
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)

    @property
    def item(self) -> tuple[Any, Any]:
        """The (key, value) pair stored in this node."""
        return (self.key, self.value)


class BinarySearchTree:
    """A binary search tree that is not rebalanced on insertion or removal."""

    def __init__(self) -> None:
        self._root: Optional[Node] = None

    @property
    def root(self) -> Optional[Node]:
        """The root node, or None when the tree is empty."""
        return self._root

    # ------------------------------------------------------------------
    # Node creation hook, overridden by balanced subclasses.

    def _make_node(self, key: Any, value: Any) -> Node:
        return Node(key, value)

    # ------------------------------------------------------------------
    # Queries

    def is_empty(self) -> bool:
        """Return True if the tree holds no items."""
        return self._root is None

    def find(self, key: Any) -> Optional[Node]:
        """Return the node holding ``key``, or None if it is absent."""
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def __getitem__(self, key: Any) -> Any:
        node = self.find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.key

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in ascending key order."""
        for node in self._nodes():
            yield node.item

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return self._subtree_height(self._root)

    def is_balanced(self) -> bool:
        """Return True if every node's subtrees differ in height by at most one."""
        return self._balanced_height(self._root) >= 0

    # ------------------------------------------------------------------
    # Mutation

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, overwriting the value of an existing key."""
        if self._root is None:
            self._root = self._make_node(key, value)
            return
        node = self._root
        parent = node
        while node is not None:
            parent = node
            if key == node.key:
                node.value = value
                return
            node = node.left if key < node.key else node.right
        new_node = self._make_node(key, value)
        new_node.parent = parent
        if key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; a node with two children is first swapped
        with its predecessor."""
        node = self.find(key)
        if node is None:
            return
        self._detach(node)

    def clear(self) -> None:
        """Remove every item from the tree."""
        self._root = None

    # ------------------------------------------------------------------
    # Helpers

    @staticmethod
    def predecessor(node: Optional[Node]) -> Optional[Node]:
        """Return the largest node of ``node``'s left subtree, or None."""
        if node is None or node.left is None:
            return None
        current = node.left
        while current.right is not None:
            current = current.right
        return current

    @staticmethod
    def _successor(node: Node) -> Optional[Node]:
        if node.right is not None:
            node = node.right
            while node.left is not None:
                node = node.left
            return node
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def _smallest_node(self) -> Optional[Node]:
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self._smallest_node()
        while node is not None:
            following = self._successor(node)
            yield node
            node = following

    @classmethod
    def _subtree_height(cls, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + max(cls._subtree_height(node.left), cls._subtree_height(node.right))

    @classmethod
    def _balanced_height(cls, node: Optional[Node]) -> int:
        """Height of a balanced subtree, or -1 if any node in it is unbalanced."""
        if node is None:
            return 0
        left = cls._balanced_height(node.left)
        if left < 0:
            return -1
        right = cls._balanced_height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    def _detach(self, node: Node) -> Optional[Node]:
        """Unlink ``node`` from the tree and return the parent it was removed from."""
        if node.left is not None and node.right is not None:
            pred = self.predecessor(node)
            if pred is not None:
                self._swap_nodes(node, pred)

        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif node is parent.left:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        return parent

    def _swap_nodes(self, n1: Optional[Node], n2: Optional[Node]) -> None:
        """Exchange the positions of two nodes in the tree."""
        if n1 is n2 or n1 is None or n2 is None:
            return
        n1p, n1r, n1l = n1.parent, n1.right, n1.left
        n1_is_left = n1p is not None and n1 is n1p.left
        n2p, n2r, n2l = n2.parent, n2.right, n2.left
        n2_is_left = n2p is not None and n2 is n2p.left

        n1.parent, n2.parent = n2.parent, n1.parent
        n1.left, n2.left = n2.left, n1.left
        n1.right, n2.right = n2.right, n1.right

        if n1r is n2:
            n2.right = n1
            n1.parent = n2
        elif n2r is n1:
            n1.right = n2
            n2.parent = n1
        elif n1l is n2:
            n2.left = n1
            n1.parent = n2
        elif n2l is n1:
            n1.left = n2
            n2.parent = n1

        if n1p is not None and n1p is not n2:
            if n1_is_left:
                n1p.left = n2
            else:
                n1p.right = n2
        if n1r is not None and n1r is not n2:
            n1r.parent = n2
        if n1l is not None and n1l is not n2:
            n1l.parent = n2

        if n2p is not None and n2p is not n1:
            if n2_is_left:
                n2p.left = n1
            else:
                n2p.right = n1
        if n2r is not None and n2r is not n1:
            n2r.parent = n1
        if n2l is not None and n2l is not n1:
            n2l.parent = n1

        if self._root is n1:
            self._root = n2
        elif self._root is n2:
            self._root = n1