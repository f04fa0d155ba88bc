"""Shape checks for n-ary trees stored as binary trees.

The left child of a node is its first child and the right child is its next
sibling.
"""

from __future__ import annotations

from typing import Iterator, Optional

from arboles.binary_tree import BinaryTree
from arboles.nodes import TreeNode


def _leaf_levels(node: Optional[TreeNode], depth: int = 1) -> Iterator[int]:
    if node is None:
        return
    if node.left is None:
        yield depth
    else:
        yield from _leaf_levels(node.left, depth + 1)
    yield from _leaf_levels(node.right, depth)


def leaves_same_level(tree: BinaryTree) -> bool:
    """True when every leaf of the n-ary tree lies on the same level.

    An empty tree counts as having all its leaves on one level.
    """
    return len(set(_leaf_levels(tree.root))) <= 1