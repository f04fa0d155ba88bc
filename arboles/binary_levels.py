"""Level, branch height and equivalence queries over a binary tree."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from arboles.binary_tree import BinaryTree
from arboles.nodes import TreeNode, tree_height


def _with_depth(node: Optional[TreeNode], depth: int = 1) -> Iterator[Tuple[TreeNode, int]]:
    if node is None:
        return
    yield node, depth
    yield from _with_depth(node.left, depth + 1)
    yield from _with_depth(node.right, depth + 1)


def level(tree: BinaryTree, key: int) -> Optional[int]:
    """Level of the node holding ``key``, the root being level 1.

    When the key occurs more than once, the last occurrence in pre-order
    wins. None when the key is not in the tree.
    """
    found: Optional[int] = None
    for node, depth in _with_depth(tree.root):
        if node.key == key:
            found = depth
    return found


def branch_height(tree: BinaryTree, key: int) -> int:
    """Height, in nodes, of the branch rooted at the node holding ``key``.

    With several matching nodes the tallest branch counts. A key that is not
    in the tree gives 1, and an empty tree gives 0.
    """
    if tree.root is None:
        return 0
    heights = (tree_height(node) for node, _ in _with_depth(tree.root) if node.key == key)
    return max(heights, default=1)


def _keys_at(node: Optional[TreeNode], depth: int, wanted: int, result: List[int]) -> None:
    if node is None:
        return
    if depth == wanted:
        result.append(node.key)
    if depth >= wanted:
        return
    _keys_at(node.left, depth + 1, wanted, result)
    _keys_at(node.right, depth + 1, wanted, result)


def keys_at_level(tree: BinaryTree, level: int) -> List[int]:
    """Keys of every node on ``level`` (root is 1), left to right."""
    result: List[int] = []
    _keys_at(tree.root, 1, level, result)
    return result


def _same(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    if first is None or second is None:
        return first is None and second is None
    return (
        first.key == second.key
        and _same(first.left, second.left)
        and _same(first.right, second.right)
    )


def equivalent(first: BinaryTree, second: BinaryTree) -> bool:
    """True when both trees have the same shape and the same keys in place."""
    return _same(first.root, second.root)