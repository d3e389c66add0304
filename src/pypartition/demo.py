#!/usr/bin/env python3
"""
demo.py

Worked examples on partition lattices:
- partitions of {•, ∗} and their Hasse diagram edges
- partitions of a larger set (default {1, 2, 3, 4}) and their cover edges
- join of two partitions, checked to be the least upper bound
- joins in the boolean lattice {false, true}
- a generative effect of the monotone map "two elements share a block"

Usage:
  python -m pypartition.demo
  python -m pypartition.demo --elements a b c d e
  python -m pypartition.demo -v
"""

import argparse
import logging
from typing import Hashable, List, Optional, Sequence

from pypartition.algorithms import verify_join
from pypartition.lattice import PartitionLattice
from pypartition.monotone import boolean_join, generative_effect, shares_block
from pypartition.partition import Partition

logger = logging.getLogger(__file__)


def _int_or_str(s: str):
    try:
        return int(s)
    except ValueError:
        return s


def hasse_demo(ground: Sequence[Hashable]) -> PartitionLattice:
    """Print every partition of ground, all refinement relations and the cover edges."""
    lattice = PartitionLattice(ground)
    print(f"Partitions of {{{', '.join(str(x) for x in lattice.ground)}}}:")
    for i, p in enumerate(lattice):
        print(f"Partition {i + 1}: {p}")
    if len(lattice) <= 5:
        print(f"Refinement relations: {[(i + 1, j + 1) for i, j in lattice.relations()]}")
    edges = lattice.covers()
    print(f"Hasse diagram edges: {[(i + 1, j + 1) for i, j in edges]}")
    print(f"Hasse diagram has {len(edges)} edges across {len(lattice.levels())} levels:")
    print(lattice)
    return lattice


def join_demo(lattice: PartitionLattice, a: Partition, b: Partition) -> bool:
    """Compute a | b and check that it is an upper bound of both, and the least one."""
    print(f"A: {a}")
    print(f"B: {b}")
    check = verify_join(lattice, a, b)
    print(f"A ∨ B: {check.join}")
    print(f"A ≤ (A ∨ B): {a <= check.join}")
    print(f"B ≤ (A ∨ B): {b <= check.join}")
    print(f"Partitions C where A ≤ C and B ≤ C: {', '.join(str(c) for c in check.candidates)}")
    print(f"(A ∨ B) ≤ C for all C: {check.least}")
    return check.upper_bound and check.least


def boolean_demo() -> List[bool]:
    print("Boolean lattice joins:")
    results = []
    for a, b in [(True, False), (False, True), (True, True), (False, False)]:
        results.append(boolean_join(a, b))
        print(f"{a} ∨ {b} = {results[-1]}")
    return results


def generative_effect_demo(ground: Sequence[Hashable], a, b, x: Hashable, y: Hashable):
    """Evaluate phi = "x and y share a block" on a, b and a | b."""
    effect = generative_effect(shares_block(x, y), a, b, ground)
    print(f"Φ(P) = {x} and {y} share a block of P")
    print(f"A: {effect.p}, B: {effect.q}, A ∨ B: {effect.join}")
    print(effect)
    if effect.generative:
        print("Generative effect: Φ(A) ∨ Φ(B) < Φ(A ∨ B)")
    return effect


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Partition lattice examples")
    ap.add_argument("--elements", nargs="+", type=_int_or_str, default=[1, 2, 3, 4],
                    help="Ground set for the larger example, 4 to 6 elements (default: 1 2 3 4)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = ap.parse_args(argv)
    e = list(dict.fromkeys(args.elements))
    if not 4 <= len(e) <= 6:
        ap.error("--elements needs 4 to 6 distinct elements")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    logger.info(f"Running examples over {e}")

    print("== Partitions of {•, ∗}")
    hasse_demo(['•', '∗'])

    print(f"\n== Partitions of {{{', '.join(str(x) for x in e)}}}")
    lattice = hasse_demo(e)

    print("\n== Join of two partitions")
    rest = [[x] for x in e[4:]]
    a = Partition([[e[0], e[1]], [e[2], e[3]]] + rest, e)
    b = Partition([[e[0], e[2]], [e[1], e[3]]] + rest, e)
    join_demo(lattice, a, b)

    print()
    boolean_demo()

    print("\n== Generative effects")
    generative_effect_demo(e, [[e[0], e[2]], [e[1]]] + [[x] for x in e[3:]],
                              [[e[0]], [e[1], e[2]]] + [[x] for x in e[3:]], e[0], e[1])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
