"""Queries over the nodes of a general binary tree."""

from __future__ import annotations

from typing import Iterator, List, Optional

from arboles.binary_tree import BinaryTree
from arboles.nodes import TreeNode


def _preorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def leaves(tree: BinaryTree) -> List[TreeNode]:
    """Nodes without children, in pre-order."""
    return [node for node in _preorder(tree.root) if node.is_leaf()]


def interior_nodes(tree: BinaryTree) -> List[TreeNode]:
    """Nodes that have both a left and a right child, in pre-order."""
    return [
        node
        for node in _preorder(tree.root)
        if node.left is not None and node.right is not None
    ]


def find_key(tree: BinaryTree, key: int) -> List[TreeNode]:
    """Every node holding ``key``, in pre-order."""
    return [node for node in _preorder(tree.root) if node.key == key]


def _parent(node: TreeNode, key: int) -> Optional[int]:
    from_left: Optional[int] = None
    from_right: Optional[int] = None
    if node.left is not None:
        if node.left.key == key:
            return node.key
        from_left = _parent(node.left, key)
    if node.right is not None:
        if node.right.key == key:
            return node.key
        from_right = _parent(node.right, key)
    return from_left if from_left is not None else from_right


def parent_key(tree: BinaryTree, key: int) -> Optional[int]:
    """Key of the parent of the node holding ``key``.

    None when the key is the root's or is not in the tree.
    """
    if tree.root is None:
        return None
    return _parent(tree.root, key)


def _children(node: TreeNode, key: int, inside: bool, result: List[int]) -> None:
    inside = inside or node.key == key
    if inside:
        result.extend(child.key for child in (node.left, node.right) if child is not None)
    for child in (node.left, node.right):
        if child is not None:
            _children(child, key, inside, result)


def children_keys(tree: BinaryTree, key: int) -> List[int]:
    """Keys below the node holding ``key``.

    Each node from the matching one downwards contributes its left and right
    child keys, so the whole branch under the match is listed.
    """
    result: List[int] = []
    if tree.root is not None:
        _children(tree.root, key, False, result)
    return result


def _sibling(node: TreeNode, key: int) -> Optional[int]:
    from_left: Optional[int] = None
    from_right: Optional[int] = None
    if node.left is not None:
        if node.left.key == key:
            if node.right is not None:
                return node.right.key
        else:
            from_left = _sibling(node.left, key)
    if node.right is not None:
        if node.right.key == key:
            if node.left is not None:
                return node.left.key
        else:
            from_right = _sibling(node.right, key)
    return from_left if from_left is not None else from_right


def sibling_key(tree: BinaryTree, key: int) -> Optional[int]:
    """Key of the sibling of the node holding ``key``, or None if it has none."""
    if tree.root is None:
        return None
    return _sibling(tree.root, key)