"""Binary search tree without self balancing."""

from __future__ import annotations

from typing import Optional, Tuple

from arboles.nodes import Element, TreeNode

DEFAULT_CAPACITY = 100


class DuplicateKeyError(ValueError):
    """Raised when a key already present is inserted again."""

    def __init__(self, key: int) -> None:
        super().__init__(f"duplicate key: {key}")
        self.key = key


def _minimum(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[TreeNode], key: int) -> Tuple[Optional[TreeNode], bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
        return node, removed
    if key > node.key:
        node.right, removed = _delete(node.right, key)
        return node, removed
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = _minimum(node.right)
    node.element = successor.element
    node.right, _ = _delete(node.right, successor.key)
    return node, True


class BinarySearchTree:
    """Keys smaller than a node go left, larger keys go right."""

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

    def insert(self, element: Element) -> bool:
        """Insert ``element``; raises DuplicateKeyError if its key is present."""
        new_node = TreeNode(element)
        if self.root is None:
            self.root = new_node
        else:
            node = self.root
            while True:
                if element.key < node.key:
                    if node.left is None:
                        node.left = new_node
                        break
                    node = node.left
                elif element.key > node.key:
                    if node.right is None:
                        node.right = new_node
                        break
                    node = node.right
                else:
                    raise DuplicateKeyError(element.key)
        self._count += 1
        return True

    def delete(self, key: int) -> bool:
        """Remove the node holding ``key``; False if it is not present."""
        self.root, removed = _delete(self.root, key)
        if removed:
            self._count -= 1
        return removed

    def search(self, key: int) -> Optional[Element]:
        """The element stored under ``key``, or None."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.element
        return None