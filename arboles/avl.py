"""Self-balancing AVL search tree."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from arboles.nodes import Element, TreeNode

DEFAULT_CAPACITY = 1000


class Balance(Enum):
    """Left height minus right height of a node."""

    RIGHT_HEAVY = -2
    SLIGHTLY_RIGHT = -1
    BALANCED = 0
    SLIGHTLY_LEFT = 1
    LEFT_HEAVY = 2


def _height(node: Optional[TreeNode]) -> int:
    return -1 if node is None else node.height


def _update_height(node: TreeNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_of(node: TreeNode) -> Balance:
    try:
        return Balance(_height(node.left) - _height(node.right))
    except ValueError:
        return Balance.BALANCED


def _rotate_left(node: TreeNode) -> TreeNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    pivot.height = max(_height(pivot.right), node.height) + 1
    return pivot


def _rotate_right(node: TreeNode) -> TreeNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    pivot.height = max(_height(pivot.left), node.height) + 1
    return pivot


def _insert(node: Optional[TreeNode], element: Element) -> Tuple[TreeNode, bool]:
    if node is None:
        return TreeNode(element), True
    if element.key < node.key:
        node.left, inserted = _insert(node.left, element)
    elif element.key > node.key:
        node.right, inserted = _insert(node.right, element)
    else:
        return node, False

    _update_height(node)
    state = _balance_of(node)
    if state is Balance.LEFT_HEAVY:
        if element.key < node.left.key:
            return _rotate_right(node), inserted
        node.left = _rotate_left(node.left)
        return _rotate_right(node), inserted
    if state is Balance.RIGHT_HEAVY:
        if element.key > node.right.key:
            return _rotate_left(node), inserted
        node.right = _rotate_right(node.right)
        return _rotate_left(node), inserted
    return node, inserted


def _minimum(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[TreeNode], key: int) -> Tuple[Optional[TreeNode], bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
    elif key > node.key:
        node.right, removed = _delete(node.right, key)
    else:
        removed = True
        if node.left is None and node.right is None:
            return None, True
        if node.left is None:
            node = node.right
        elif node.right is None:
            node = node.left
        else:
            successor = _minimum(node.right)
            node.element = successor.element
            node.right, _ = _delete(node.right, successor.key)

    _update_height(node)
    state = _balance_of(node)
    if state is Balance.LEFT_HEAVY:
        if _balance_of(node.left) in (Balance.BALANCED, Balance.SLIGHTLY_LEFT):
            return _rotate_right(node), removed
        node.left = _rotate_left(node.left)
        return _rotate_right(node), removed
    if state is Balance.RIGHT_HEAVY:
        if _balance_of(node.right) in (Balance.BALANCED, Balance.SLIGHTLY_RIGHT):
            return _rotate_left(node), removed
        node.right = _rotate_right(node.right)
        return _rotate_left(node), removed
    return node, removed


class AVLTree:
    """Search tree kept balanced by rotations after each change."""

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
        """Insert ``element``; False if its key is already present."""
        self.root, inserted = _insert(self.root, element)
        if inserted:
            self._count += 1
        return inserted

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