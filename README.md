# searchtrees

Ordered key/value maps built on binary search trees.

- `searchtrees.bst` — `BinarySearchTree`, a plain, unbalanced binary search
  tree, and its `Node` class.
- `searchtrees.avl` — `AVLTree`, a self-balancing AVL tree with the same
  interface, built from `AVLNode`s that record their subtree height.
- `searchtrees.printing` — `render_tree` and `print_tree`, which draw a tree
  with box-drawing characters, numbering the nodes and listing their keys and
  values underneath.
- `searchtrees.equal_paths` — `TreeNode`, `subtree_height` and `equal_paths`
  for simple integer-keyed binary trees.
- `searchtrees.demo` — a short demonstration, also installed as a command.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
from searchtrees.avl import AVLTree

tree = AVLTree()
for key, value in [("c", 3), ("a", 1), ("b", 2)]:
    tree.insert(key, value)

tree["d"] = 4              # same as tree.insert("d", 4)
tree.insert("a", 10)       # an existing key gets the new value
print(tree["a"])           # 10
print("b" in tree)         # True
print(list(tree))          # ['a', 'b', 'c', 'd']
print(list(tree.items()))  # [('a', 10), ('b', 2), ('c', 3), ('d', 4)]

tree.remove("b")           # removing a missing key does nothing
print(len(tree), tree.height(), tree.is_balanced_tree())
```

Both tree types offer:

- `insert(key, value)`, `remove(key)`, `clear()`
- `find(key)`, returning the `Node` holding the key or `None`
- `tree[key]` (raises `KeyError` for a missing key), `tree[key] = value`,
  `key in tree`, `len(tree)`
- iteration over keys and `items()` over `(key, value)` pairs, in ascending
  key order
- `height()`, the number of nodes on the longest root-to-leaf path, and
  `is_balanced()`, which checks every node's subtrees differ in height by at
  most one
- `root`, the root node or `None`, and `is_empty()`
- `BinarySearchTree.predecessor(node)`, the largest node in a node's left
  subtree

A node with two children is removed by swapping it with its in-order
predecessor first. `AVLTree.is_balanced_tree()` checks balance using the
heights the nodes have recorded rather than recounting them.

Keys may be of any type that supports `==` and `<` among themselves.

## Drawing a tree

```python
from searchtrees.printing import print_tree, render_tree

print_tree(tree)                    # writes to standard output
text = render_tree(tree, tree.root) # the same diagram as a string
```

Only the top six levels are drawn; when the tree is deeper, a line notes
that deeper levels were omitted. An empty tree is shown as `<empty tree>`.

## Checking leaf depths

```python
from searchtrees.equal_paths import TreeNode, equal_paths

root = TreeNode(1, TreeNode(2), TreeNode(3))
print(equal_paths(root))  # True
```

`equal_paths` compares the heights of the root's two subtrees. A root with a
single child that is itself a leaf is also reported as `True`, as is an
empty tree.

## Demo

```
searchtrees-demo
```

It fills a plain tree and an AVL tree with two items each, prints their
contents, reports whether key `b` was found and then erases it. The same is
available from Python as `searchtrees.demo.run_demo(out)`, which writes to
any text stream.

## Limits

The trees live in memory only: there is no saving to or loading from files.