"""Interactive loading of a binary tree and of non-negative numbers."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Iterator, Optional, TextIO

from arboles.binary_tree import BinaryTree
from arboles.nodes import Element, TreeNode

_DIGITS = frozenset("0123456789")

KEY_PROMPT = "[INPUT] Ingrese una clave numerica o '.' para nulo: "
INVALID_KEY = "[ERROR] Entrada invalida (valor fuera de rango).\n"
INVALID_NUMBER = "[ERROR] Debe ingresar un valor valido.\n"


class _Side(Enum):
    ROOT = 0
    LEFT = -1
    RIGHT = 1


def parse_key(text: str) -> Optional[int]:
    """Parse one entry: a decimal key, or None for ``'.'`` (no node).

    Raises ValueError when the entry holds anything but decimal digits.
    """
    if text.startswith("."):
        return None
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"invalid key: {text!r}")
    return int(text)


def _next_entry(entries: Iterator[str]) -> str:
    for item in entries:
        entry = item.strip()
        if entry:
            return entry
    raise EOFError("input ended before the tree was complete")


def _prompt_for(side: _Side, parent: Optional[TreeNode]) -> str:
    if side is _Side.LEFT:
        return f"[INPUT] Ingrese el hijo izquierdo de {parent.key}.\n"
    if side is _Side.RIGHT:
        return f"[INPUT] Ingrese el hijo derecho de {parent.key}.\n"
    return "[INPUT] Ingrese la raiz.\n"


def _load(
    tree: BinaryTree,
    parent: Optional[TreeNode],
    side: _Side,
    entries: Iterator[str],
    output: TextIO,
) -> None:
    while True:
        if tree.is_full():
            return
        output.write(_prompt_for(side, parent))
        output.write(KEY_PROMPT)
        try:
            key = parse_key(_next_entry(entries))
        except ValueError:
            output.write(INVALID_KEY)
            continue
        break

    if key is None:
        return
    element = Element(key)
    if side is _Side.LEFT:
        node = tree.attach_left(parent, element)
    elif side is _Side.RIGHT:
        node = tree.attach_right(parent, element)
    else:
        node = tree.set_root(element)
    _load(tree, node, _Side.LEFT, entries, output)
    _load(tree, node, _Side.RIGHT, entries, output)


def load_binary_tree(
    tree: BinaryTree, lines: Iterable[str], output: Optional[TextIO] = None
) -> None:
    """Fill ``tree`` in pre-order from ``lines``, one entry per item.

    Each node is followed by its left and then its right subtree; ``'.'``
    stands for a missing child. Invalid entries are reported and asked for
    again. Loading stops early once the tree is full. Pass an iterator to
    keep reading the same input afterwards.
    """
    out = output if output is not None else sys.stdout
    _load(tree, None, _Side.ROOT, iter(lines), out)


def read_non_negative(
    prompt: str, lines: Iterable[str], output: Optional[TextIO] = None
) -> int:
    """Ask with ``prompt`` until an entry is a whole number of at least 0."""
    out = output if output is not None else sys.stdout
    entries = iter(lines)
    while True:
        out.write(prompt)
        try:
            value = int(_next_entry(entries))
        except ValueError:
            value = -1
        if value >= 0:
            return value
        out.write(INVALID_NUMBER)