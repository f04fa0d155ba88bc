import pytest

from arboles.binary_tree import BinaryTree
from arboles.nary_queries import (
    height,
    internal_nodes,
    level,
    parent,
    siblings,
    similar,
)
from arboles.nodes import Element


def _sample(offset=0):
    """Root 1 with children 2, 3, 4; 2 has children 5, 6; 4 has child 7."""
    tree = BinaryTree()
    root = tree.set_root(Element(1 + offset))
    two = tree.attach_left(root, Element(2 + offset))
    three = tree.attach_right(two, Element(3 + offset))
    four = tree.attach_right(three, Element(4 + offset))
    five = tree.attach_left(two, Element(5 + offset))
    tree.attach_right(five, Element(6 + offset))
    tree.attach_left(four, Element(7 + offset))
    return tree


def _chain(keys):
    tree = BinaryTree()
    node = tree.set_root(Element(keys[0]))
    for key in keys[1:]:
        node = tree.attach_left(node, Element(key))
    return tree


def test_similar_ignores_keys():
    assert similar(_sample(), _sample(offset=10)) is True


def test_similar_detects_different_shape():
    assert similar(_sample(), _chain([1, 2, 3])) is False


def test_similar_empty_trees():
    assert similar(BinaryTree(), BinaryTree()) is True
    assert similar(BinaryTree(), _chain([1])) is False


@pytest.mark.parametrize("child, expected", [(5, 2), (6, 2), (3, 1), (4, 1), (7, 4), (2, 1)])
def test_parent(child, expected):
    assert parent(_sample(), child).key == expected


def test_parent_of_root_is_root():
    assert parent(_sample(), 1).key == 1


def test_parent_missing_key():
    assert parent(_sample(), 99) is None
    assert parent(BinaryTree(), 1) is None


def test_siblings():
    tree = _sample()
    assert [e.key for e in siblings(tree, 3)] == [2, 4]
    assert [e.key for e in siblings(tree, 6)] == [5]
    assert siblings(tree, 7) == []


def test_siblings_missing_key_raises():
    with pytest.raises(KeyError):
        siblings(_sample(), 99)


def test_siblings_exclude_the_node_itself():
    tree = _sample()
    for key in (2, 3, 4, 5, 6, 7):
        assert key not in [e.key for e in siblings(tree, key)]


def test_height_of_chain_matches_length():
    tree = _chain([4, 8, 15, 16])
    assert height(tree) == len(tree)


def test_height_ignores_siblings():
    tree = BinaryTree()
    node = tree.set_root(Element(1))
    child = tree.attach_left(node, Element(2))
    for key in (3, 4, 5):
        child = tree.attach_right(child, Element(key))
    assert height(tree) == height(_chain([1, 2]))


def test_height_of_empty_tree():
    assert height(BinaryTree()) == 0


def test_height_is_deepest_level():
    tree = _sample()
    keys = [node.key for node in internal_nodes(tree)]
    assert height(tree) == max(level(tree, key) for key in keys)


def test_levels_follow_parents():
    tree = _sample()
    assert level(tree, 1) == 1
    assert level(tree, 3) == level(tree, 2) == level(tree, 4)
    assert level(tree, 5) == level(tree, 2) + 1
    assert level(tree, 7) == level(tree, 4) + 1


def test_level_missing_key():
    assert level(_sample(), 99) is None
    assert level(BinaryTree(), 1) is None


def test_internal_nodes_preorder():
    tree = _sample()
    assert [node.key for node in internal_nodes(tree)] == [1, 2, 5, 6, 3, 4, 7]


def test_internal_nodes_cover_the_tree():
    tree = _sample()
    nodes = internal_nodes(tree)
    assert len(nodes) == len(tree)
    assert nodes[0] is tree.root
    assert internal_nodes(BinaryTree()) == []