"""A general binary tree built by attaching children to existing nodes."""

from __future__ import annotations

from typing import Optional

from arboles.nodes import Element, TreeNode

DEFAULT_CAPACITY = 100


class BinaryTree:
    """Binary tree with no ordering; nodes are connected explicitly."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self.root: Optional[TreeNode] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self.root is None

    def is_full(self) -> bool:
        return self._count == self.capacity

    def set_root(self, element: Element) -> TreeNode:
        """Create the root; if one exists it is returned unchanged."""
        if self.root is not None:
            return self.root
        self.root = TreeNode(element)
        self._count += 1
        return self.root

    def attach_left(self, node: Optional[TreeNode], element: Element) -> Optional[TreeNode]:
        """Give ``node`` a left child; an existing left child is returned as is."""
        if node is None:
            return None
        if node.left is not None:
            return node.left
        node.left = TreeNode(element)
        self._count += 1
        return node.left

    def attach_right(self, node: Optional[TreeNode], element: Element) -> Optional[TreeNode]:
        """Give ``node`` a right child; an existing right child is returned as is."""
        if node is None:
            return None
        if node.right is not None:
            return node.right
        node.right = TreeNode(element)
        self._count += 1
        return node.right