"""Text rendering of a binary search tree as a small ASCII diagram."""

from __future__ import annotations

import sys
from typing import Optional

from searchtrees.bst import BinarySearchTree, Node

MAX_HEIGHT = 6
"""Deepest level of a tree that is drawn."""

BOX_WIDTH = 4
PADDING = 2
ELEMENT_WIDTH = BOX_WIDTH + PADDING

EMPTY_TREE = "<empty tree>\n"
CLIPPED_NOTICE = "(deeper levels omitted due to space limitations)\n"
PLACEHOLDER_HEADER = "Tree Placeholders:------------------\n"


def _node_depth(root: Node, node: Optional[Node]) -> int:
    """Distance of ``node`` from ``root`` (1 for the root itself).

    Returns -1 when the node lies deeper than MAX_HEIGHT and -2 when it is not
    reachable from ``root`` by following parent links.
    """
    depth = 1
    while node is not root:
        if node is None:
            return -2
        depth += 1
        node = node.parent
        if depth > MAX_HEIGHT:
            return -1
    return depth


def _subtree_height(node: Optional[Node], depth: int = 1) -> int:
    """Height of the subtree at ``node``, never looking below MAX_HEIGHT levels."""
    if node is None or depth > MAX_HEIGHT:
        return 0
    return 1 + max(
        _subtree_height(node.left, depth + 1),
        _subtree_height(node.right, depth + 1),
    )


def _branch(node: Optional[Node], child: Optional[Node], half: int, left: bool) -> str:
    if node is None or child is None:
        return " " * (half + 3)
    line = "\u2500" * max(half - 1, 0)
    if left:
        return "\u250c" + line + "\u2518  "
    return "\u2514" + line + "\u2510  "


def render_tree(tree: BinarySearchTree, root: Optional[Node]) -> str:
    """Draw the tree below ``root`` and list what each numbered box holds."""
    if root is None:
        return EMPTY_TREE

    height = _subtree_height(root)
    clipped = False
    if height > MAX_HEIGHT:
        height = MAX_HEIGHT
        clipped = True

    final_row_width = ELEMENT_WIDTH * 2 ** (height - 1) - PADDING

    placeholders: dict = {}
    for key, _ in tree.items():
        if _node_depth(root, tree.find(key)) != -1:
            placeholders.setdefault(key, len(placeholders) + 1)

    margin = final_row_width // 2 - BOX_WIDTH // 2
    padding = final_row_width - 2
    row: list[Optional[Node]] = [root]
    lines: list[str] = []

    for level in range(height):
        cells = [
            "    " if node is None else f"[{placeholders.get(node.key, 0):02d}]"
            for node in row
        ]
        lines.append(" " * margin + (" " * padding).join(cells) + "\n")

        padding = (padding - BOX_WIDTH) // 2
        margin = margin - (padding // 2 + 2)

        previous = row
        row = []
        for node in previous:
            if node is None:
                row.extend((None, None))
            else:
                row.extend((node.left, node.right))

        if level < height - 1:
            half = padding // 2
            parts = [" " * (margin + 2)]
            for node in previous:
                parts.append(_branch(node, node.left if node else None, half, True))
                parts.append(_branch(node, node.right if node else None, half, False))
                parts.append(" " * (padding + 2))
            lines.append("".join(parts) + "\n")

    lines.append("\n")
    if clipped:
        lines.append(CLIPPED_NOTICE)

    lines.append(PLACEHOLDER_HEADER)
    for key, number in placeholders.items():
        node = tree.find(key)
        shown = "<error: lookup failed>" if node is None else str(node.value)
        lines.append(f"[{number:02d}] -> ({key}, {shown})\n")

    return "".join(lines)


def print_tree(tree: BinarySearchTree) -> None:
    """Write the diagram of the whole tree to standard output."""
    sys.stdout.write(render_tree(tree, tree.root) + "\n")