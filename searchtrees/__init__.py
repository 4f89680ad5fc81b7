"""Binary search trees, AVL trees, tree drawing and a leaf-depth check."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "demo", "equal_paths", "printing"]