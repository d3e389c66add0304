import logging
from typing import Dict, Hashable, Iterable, List, Tuple

from tqdm import tqdm

from pypartition.algorithms import set_partitions
from pypartition.partition import Partition

logger = logging.getLogger(__file__)


class PartitionLattice:
    """All partitions of a finite ground set, ordered by refinement.

    Partitions are enumerated coarsest first: by number of blocks, then by the
    ground set positions of their blocks. Indices into this enumeration are what
    relations() and covers() report.
    """

    def __init__(self, ground: Iterable[Hashable]):
        self.ground = tuple(dict.fromkeys(ground))
        position = {x:i for i, x in enumerate(self.ground)}

        def _key(p: Partition):
            return (len(p), [sorted(position[x] for x in b) for b in p.blocks])

        self.partitions = sorted((Partition(blocks, self.ground) for blocks in set_partitions(self.ground)), key=_key)
        """The enumerated partitions, coarsest first"""
        self._index = {p:i for i, p in enumerate(self.partitions)}
        logger.info(f"Enumerated {len(self.partitions)} partitions of {len(self.ground)} elements")

    # ==================
    # Accessors
    # ==================

    @property
    def top(self) -> Partition:
        """The single-block partition."""
        return self.partitions[0]

    @property
    def bottom(self) -> Partition:
        """The all-singletons partition."""
        return self.partitions[-1]

    def index(self, p) -> int:
        """Position of p (a Partition or raw blocks) in the enumeration."""
        return self._index[Partition.coerce(p, self.ground)]

    def levels(self) -> Dict[int, List[Partition]]:
        """Partitions grouped by their number of blocks."""
        levels = {}
        for p in self.partitions:
            levels.setdefault(len(p), []).append(p)
        return levels

    # ==================
    # Order
    # ==================

    def relations(self) -> List[Tuple[int, int]]:
        """All pairs (i, j), i != j, where partition i refines partition j."""
        P = self.partitions
        return [(i, j) for i in range(len(P)) for j in range(len(P)) if i != j and P[i] <= P[j]]

    def covers(self, progress=False) -> List[Tuple[int, int]]:
        """The Hasse diagram edges: pairs (i, j) where partition i refines
           partition j and no third partition k lies between them, i.e.
           i <= k <= j for k != i, j. Cubic in the number of partitions.

           :param progress: show a progress bar over the partitions"""
        P = self.partitions
        n = len(P)
        leq = [[P[i] <= P[j] for j in range(n)] for i in range(n)]
        edges = []
        for i in tqdm(range(n), disable=not progress):
            for j in range(n):
                if i == j or not leq[i][j]:
                    continue
                if not any(leq[i][k] and leq[k][j] for k in range(n) if k != i and k != j):
                    edges.append((i, j))
                    logger.debug(f"Cover {P[i]} <= {P[j]}")
        logger.info(f"Found {len(edges)} cover edges among {n} partitions")
        return edges

    def upper_bounds(self, p: Partition, q: Partition) -> List[Partition]:
        """Every partition C in the lattice with p <= C and q <= C."""
        return [c for c in self.partitions if p <= c and q <= c]

    def lower_bounds(self, p: Partition, q: Partition) -> List[Partition]:
        """Every partition C in the lattice with C <= p and C <= q."""
        return [c for c in self.partitions if c <= p and c <= q]

    def is_join(self, r: Partition, p: Partition, q: Partition) -> bool:
        """True if r is the least upper bound of p and q in the lattice."""
        return p <= r and q <= r and all(r <= c for c in self.upper_bounds(p, q))

    def is_meet(self, r: Partition, p: Partition, q: Partition) -> bool:
        """True if r is the greatest lower bound of p and q in the lattice."""
        return r <= p and r <= q and all(c <= r for c in self.lower_bounds(p, q))

    # ==================
    # Rendering
    # ==================

    def view(self) -> 'graphviz.Digraph':
        """Creates a 'graphviz.Digraph' of the Hasse diagram. Will automatically display in Jupyter.

           Nodes are named P1 ... Pn in enumeration order and labelled with their
           partition; there is one edge per cover, drawn from finer to coarser,
           so that the finest partition sits at the bottom."""
        import graphviz
        g = graphviz.Digraph(f'hasse_{len(self.ground)}', graph_attr={"rankdir": "BT"})
        g.attr('node', shape='box')
        for i, p in enumerate(self.partitions):
            g.node(f"P{i + 1}", label=graphviz.nohtml(str(p)))
        for i, j in self.covers():
            g.edge(f"P{i + 1}", f"P{j + 1}")
        return g

    # ==================
    # Magic Methods
    # ==================

    def __len__(self):
        """Return the number of partitions."""
        return len(self.partitions)

    def __iter__(self):
        return iter(self.partitions)

    def __getitem__(self, i) -> Partition:
        return self.partitions[i]

    def __contains__(self, p):
        return p in self._index

    def __str__(self):
        """A level-by-level summary, coarsest at the top and finest at the bottom."""
        lines = []
        for k, ps in sorted(self.levels().items()):
            lines.append(f"{k} block{'s' if k != 1 else ''}: " + ', '.join(f"P{self._index[p] + 1} {p}" for p in ps))
        return '\n'.join(lines)
