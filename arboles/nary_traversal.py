"""Traversals of n-ary trees stored as binary trees.

The left child of a node is its first child and the right child is its next
sibling.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional

from arboles.binary_tree import BinaryTree
from arboles.nodes import TreeNode


def breadth_first(tree: BinaryTree) -> List[int]:
    """Keys of the n-ary tree level by level, siblings left to right.

    Siblings of the root, if any, are not part of the tree and are ignored.
    """
    root = tree.root
    if root is None:
        return []
    keys = [root.key]
    pending: Deque[TreeNode] = deque()
    if root.left is not None:
        pending.append(root.left)
    while pending:
        node = pending.popleft()
        keys.append(node.key)
        while node.right is not None:
            keys.append(node.right.key)
            if node.left is not None:
                pending.append(node.left)
            node = node.right
        if node.left is not None:
            pending.append(node.left)
    return keys


def _all_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    pending: Deque[TreeNode] = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        yield node
        pending.extend(child for child in (node.left, node.right) if child is not None)


def count_leaves(tree: BinaryTree) -> int:
    """Number of n-ary leaves: stored nodes that have no first child."""
    return sum(1 for node in _all_nodes(tree.root) if node.left is None)