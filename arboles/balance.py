"""Building search trees from keys and comparing their heights."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional

from arboles.avl import AVLTree
from arboles.binary_tree import BinaryTree
from arboles.bst import BinarySearchTree, DuplicateKeyError
from arboles.nodes import Element, TreeNode, tree_height


def _preorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def build_avl(tree: BinaryTree) -> AVLTree:
    """An AVL tree holding the elements of ``tree``, inserted in pre-order."""
    avl = AVLTree()
    for node in _preorder(tree.root):
        avl.insert(node.element)
    return avl


def height_difference(tree: BinaryTree, avl: AVLTree) -> int:
    """Absolute difference between the heights of ``tree`` and ``avl``."""
    return abs(tree_height(tree.root) - tree_height(avl.root))


def generate_unique_keys(
    count: int, minimum: int, maximum: int, rng: Optional[random.Random] = None
) -> List[int]:
    """``count`` distinct random keys between ``minimum`` and ``maximum`` inclusive.

    Raises ValueError when the range holds fewer than ``count`` keys.
    """
    span = maximum - minimum + 1
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    if span < count:
        raise ValueError(
            f"No es posible generar {count} claves únicas en el rango dado."
        )
    source = rng if rng is not None else random
    return source.sample(range(minimum, maximum + 1), count)


def build_bst(keys: Iterable[int]) -> BinarySearchTree:
    """A binary search tree with ``keys`` inserted in order; repeats are skipped."""
    bst = BinarySearchTree()
    for key in keys:
        try:
            bst.insert(Element(key))
        except DuplicateKeyError:
            continue
    return bst


def build_avl_from_keys(keys: Iterable[int]) -> AVLTree:
    """An AVL tree with ``keys`` inserted in order; repeats are skipped."""
    avl = AVLTree()
    for key in keys:
        avl.insert(Element(key))
    return avl


def bst_avl_height_difference(bst: BinarySearchTree, avl: AVLTree) -> int:
    """Height of ``bst`` minus height of ``avl``."""
    return tree_height(bst.root) - tree_height(avl.root)


def compare_trees(
    repetitions: int,
    minimum: int,
    maximum: int,
    count: int,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Height differences of ``repetitions`` random BST/AVL pairs."""
    differences = []
    for _ in range(repetitions):
        keys = generate_unique_keys(count, minimum, maximum, rng)
        differences.append(
            bst_avl_height_difference(build_bst(keys), build_avl_from_keys(keys))
        )
    return differences