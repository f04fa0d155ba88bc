"""Elements and nodes shared by every tree in the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Element:
    """A keyed item stored in a tree or a container."""

    key: int
    value: Any = None


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; ``height`` is maintained only by AVL trees."""

    element: Element
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    height: int = 0

    @property
    def key(self) -> int:
        return self.element.key

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def tree_height(node: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from ``node`` down; 0 for no node."""
    if node is None:
        return 0
    return 1 + max(tree_height(node.left), tree_height(node.right))