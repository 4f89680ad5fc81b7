"""A short demonstration of both tree types."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from searchtrees.avl import AVLTree
from searchtrees.bst import BinarySearchTree


def _exercise(tree: BinarySearchTree, title: str, out: TextIO) -> None:
    tree.insert("a", 1)
    tree.insert("b", 2)
    out.write(f"{title} contents:\n")
    for key, value in tree.items():
        out.write(f"{key} {value}\n")
    out.write("Found b\n" if "b" in tree else "Did not find b\n")
    out.write("Erasing b\n")
    tree.remove("b")


def run_demo(out: TextIO) -> None:
    """Fill, search and shrink a plain tree and an AVL tree, reporting to ``out``."""
    _exercise(BinarySearchTree(), "Binary Search Tree", out)
    out.write("\n")
    _exercise(AVLTree(), "AVLTree", out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration on standard output."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())