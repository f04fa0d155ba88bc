"""Queries over n-ary trees stored as binary trees.

The left child of a node is its first child and the right child is its next
sibling.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from arboles.binary_tree import BinaryTree
from arboles.nodes import Element, TreeNode


def _same_shape(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    if first is None or second is None:
        return first is None and second is None
    return _same_shape(first.left, second.left) and _same_shape(first.right, second.right)


def similar(first: BinaryTree, second: BinaryTree) -> bool:
    """True when both trees have the same structure, whatever their keys."""
    return _same_shape(first.root, second.root)


def _parent_node(node: TreeNode, parent: TreeNode, key: int) -> Optional[TreeNode]:
    if node.key == key:
        return parent
    if node.right is not None:
        found = _parent_node(node.right, parent, key)
        if found is not None:
            return found
    if node.left is not None:
        return _parent_node(node.left, node, key)
    return None


def _find_parent(tree: BinaryTree, key: int) -> Optional[TreeNode]:
    if tree.root is None:
        return None
    return _parent_node(tree.root, tree.root, key)


def parent(tree: BinaryTree, key: int) -> Optional[Element]:
    """Element of the parent of the node holding ``key``.

    The root counts as its own parent. None when the key is not in the tree.
    """
    node = _find_parent(tree, key)
    return None if node is None else node.element


def _sibling_chain(first: Optional[TreeNode]) -> Iterator[TreeNode]:
    node = first
    while node is not None:
        yield node
        node = node.right


def siblings(tree: BinaryTree, key: int) -> List[Element]:
    """Elements of the other children of the parent of the node holding ``key``.

    Raises KeyError when the key is not in the tree.
    """
    owner = _find_parent(tree, key)
    if owner is None:
        raise KeyError(key)
    return [node.element for node in _sibling_chain(owner.left) if node.key != key]


def _with_level(node: Optional[TreeNode], depth: int = 1) -> Iterator[Tuple[TreeNode, int]]:
    if node is None:
        return
    yield node, depth
    yield from _with_level(node.left, depth + 1)
    yield from _with_level(node.right, depth)


def height(tree: BinaryTree) -> int:
    """Number of levels of the n-ary tree; 0 when it is empty."""
    return max((depth for _, depth in _with_level(tree.root)), default=0)


def level(tree: BinaryTree, key: int) -> Optional[int]:
    """Level of the node holding ``key``, the root being level 1.

    When the key occurs more than once the last occurrence in pre-order
    wins. None when the key is not in the tree.
    """
    found: Optional[int] = None
    for node, depth in _with_level(tree.root):
        if node.key == key:
            found = depth
    return found


def internal_nodes(tree: BinaryTree) -> List[TreeNode]:
    """Every stored node, in pre-order of the binary representation."""
    return [node for node, _ in _with_level(tree.root)]