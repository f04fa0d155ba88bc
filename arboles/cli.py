"""Command that compares the heights of random search trees and AVL trees."""

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from arboles.balance import build_avl_from_keys, build_bst, generate_unique_keys
from arboles.loader import read_non_negative
from arboles.nodes import tree_height

REPETITIONS_PROMPT = "[INPUT] Ingrese el numero de repeticiones: "
CONCLUSION = (
    "\n[OUTPUT] En Conclusion el auto balanceo del arbol AVL es mas grande que en "
    "el del arbol ABB,\nen la mayoria de las ocasiones lo llega a reducir hasta "
    "casi la mitad teniendo en cuenta su rama mas larga.\n"
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare heights of binary search trees and AVL trees built from random keys."
    )
    parser.add_argument("-n", "--repetitions", type=int, help="number of repetitions")
    parser.add_argument("--count", type=int, default=10, help="keys per tree")
    parser.add_argument("--minimum", type=int, default=1, help="smallest key")
    parser.add_argument("--maximum", type=int, default=100, help="largest key")
    parser.add_argument("--seed", type=int, help="seed for the random keys")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the comparison; returns the exit status."""
    args = _parser().parse_args(argv)
    out = sys.stdout
    repetitions = args.repetitions
    if repetitions is None:
        try:
            repetitions = read_non_negative(REPETITIONS_PROMPT, sys.stdin, out)
        except EOFError:
            print("[ERROR] No se ingreso el numero de repeticiones.", file=sys.stderr)
            return 1
    rng = random.Random(args.seed)

    for index in range(1, repetitions + 1):
        try:
            keys = generate_unique_keys(args.count, args.minimum, args.maximum, rng)
        except ValueError as error:
            print(f"[ERROR] {error}", file=sys.stderr)
            return 1
        bst_height = tree_height(build_bst(keys).root)
        avl_height = tree_height(build_avl_from_keys(keys).root)
        out.write(f"[OUTPUT] La altura de ABB es de: {bst_height} \n")
        out.write(f"[OUTPUT] La altura de AVL es de: {avl_height} \n")
        out.write(
            "[OUTPUT] Diferencia de alturas entre el Arbol de Busqueda Binaria y "
            f"Arbol AVL en la repeticion {index}: {bst_height - avl_height}\n"
        )
    if repetitions >= 1:
        out.write(CONCLUSION)
    return 0