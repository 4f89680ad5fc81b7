import pytest

from searchtrees.bst import BinarySearchTree
from searchtrees.printing import (
    EMPTY_TREE,
    MAX_HEIGHT,
    PLACEHOLDER_HEADER,
    print_tree,
    render_tree,
)


def _tree(*keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key, key * 10 if isinstance(key, int) else key.upper())
    return tree


def _box_rows(text):
    diagram = text.split("\n\n", 1)[0]
    return [line for line in diagram.split("\n") if "[" in line]


def _placeholder_lines(text):
    return text.split(PLACEHOLDER_HEADER, 1)[1].splitlines()


def test_empty_tree():
    tree = BinarySearchTree()
    assert render_tree(tree, tree.root) == "<empty tree>\n"


def test_single_node_rendering():
    tree = BinarySearchTree()
    tree.insert("a", 1)
    expected = "[01]\n\n" + PLACEHOLDER_HEADER + "[01] -> (a, 1)\n"
    assert render_tree(tree, tree.root) == expected


def test_print_tree_writes_rendering_and_newline(capsys):
    tree = _tree(2, 1, 3)
    print_tree(tree)
    captured = capsys.readouterr().out
    assert captured == render_tree(tree, tree.root) + "\n"


def test_print_empty_tree(capsys):
    print_tree(BinarySearchTree())
    assert capsys.readouterr().out == EMPTY_TREE + "\n"


def test_placeholders_follow_key_order():
    tree = _tree(4, 2, 6, 1, 3, 5, 7)
    lines = _placeholder_lines(render_tree(tree, tree.root))
    assert len(lines) == len(tree)
    for number, (key, value) in enumerate(tree.items(), start=1):
        assert lines[number - 1] == f"[{number:02d}] -> ({key}, {value})"


def test_box_rows_match_height():
    tree = _tree(4, 2, 6, 1, 3, 5, 7)
    text = render_tree(tree, tree.root)
    rows = _box_rows(text)
    assert len(rows) == tree.height()
    assert rows[0].strip() == "[04]"
    assert [row.count("[") for row in rows] == [1, 2, 4]


def test_connectors_match_children():
    tree = _tree(4, 2, 6, 1, 3, 5, 7)
    text = render_tree(tree, tree.root)
    assert text.count("\u250c") == 3
    assert text.count("\u2510") == 3
    assert text.count("\u2518") == text.count("\u250c")
    assert text.count("\u2514") == text.count("\u2510")


def test_missing_child_leaves_no_connector():
    tree = _tree("a", "b")
    text = render_tree(tree, tree.root)
    assert "\u250c" not in text
    assert text.count("\u2510") == 1
    rows = _box_rows(text)
    assert rows[1].strip() == "[02]"


def test_deep_tree_is_cut_at_max_height():
    tree = _tree(*range(10))
    text = render_tree(tree, tree.root)
    assert len(_box_rows(text)) == MAX_HEIGHT
    lines = _placeholder_lines(text)
    assert len(lines) == MAX_HEIGHT
    assert lines[-1].startswith(f"[{MAX_HEIGHT:02d}] -> ({MAX_HEIGHT - 1},")


def test_subtree_rendering_keeps_unrelated_keys():
    tree = _tree(2, 1, 3)
    text = render_tree(tree, tree.root.left)
    rows = _box_rows(text)
    assert len(rows) == 1
    assert rows[0].strip() == "[01]"
    assert len(_placeholder_lines(text)) == len(tree)


@pytest.mark.parametrize("keys", [(5,), (5, 3), (5, 3, 8, 1), (1, 2, 3, 4)])
def test_every_key_is_listed(keys):
    tree = _tree(*keys)
    lines = _placeholder_lines(render_tree(tree, tree.root))
    listed = [line.split("(", 1)[1].split(",", 1)[0] for line in lines]
    assert listed == [str(key) for key in sorted(keys)]