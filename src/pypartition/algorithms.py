#!/usr/bin/env python

"""Defines common algorithms over set partitions"""
from collections import namedtuple
from typing import TYPE_CHECKING, Hashable, Iterable, Iterator, List, Sequence

from pypartition.partition import Partition

if TYPE_CHECKING:
    from .lattice import PartitionLattice


JoinCheck = namedtuple('JoinCheck', ['join', 'upper_bound', 'candidates', 'least'])
JoinCheck.__doc__ = """Result of verify_join: the join of two partitions, whether it is
an upper bound of both, every enumerated common upper bound, and whether
the join refines all of them."""


def set_partitions(elements: Iterable[Hashable]) -> Iterator[List[List[Hashable]]]:
    """Yield every set partition of elements, as a list of blocks (lists).

       The last element is either put in a block of its own or added to each
       block of a partition of the remaining elements in turn. There are
       bell_number(n) partitions of n elements."""
    _elements = tuple(elements)
    yield from _set_partitions(_elements, len(_elements))


def _set_partitions(elements: Sequence[Hashable], n: int) -> Iterator[List[List[Hashable]]]:
    if n == 0:
        yield []
        return
    last = elements[n - 1]
    for partition in _set_partitions(elements, n - 1):
        yield partition + [[last]]
        for i, block in enumerate(partition):
            yield partition[:i] + [block + [last]] + partition[i + 1:]


def bell_number(n: int) -> int:
    """Number of partitions of an n-element set, via the Bell triangle."""
    if n < 0:
        raise ValueError("Bell numbers are defined for n >= 0")
    row = [1]
    for _ in range(n):
        newrow = [row[-1]]
        for x in row:
            newrow.append(newrow[-1] + x)
        row = newrow
    return row[0]


def verify_join(lattice: 'PartitionLattice', p: Partition, q: Partition) -> JoinCheck:
    """Check that p | q is the least upper bound of p and q within lattice.

       The join must lie above both p and q, and must refine every partition C
       of the lattice with p <= C and q <= C."""
    r = p.join(q)
    candidates = lattice.upper_bounds(p, q)
    return JoinCheck(r, p <= r and q <= r, candidates, all(r <= c for c in candidates))
