from typing import Any, Callable, FrozenSet, Hashable, Iterable, Iterator, List, Optional, Tuple

from pypartition._private.disjoint_set import DisjointSet
from pypartition._private.exceptions import InvalidPartitionException, MismatchedGroundSetException


class Partition:
    """An immutable set partition of a finite ground set, ordered by refinement.

    ``P <= Q`` means P refines Q: every block of P is a subset of some block of Q.
    Finer partitions are therefore below coarser ones, the all-singletons partition
    is the bottom and the single-block partition is the top.
    """

    __slots__ = ['_ground', '_groundset', '_blocks', '_blockof']

    # ==================
    # Initializers
    # ==================

    def __init__(self, blocks: Iterable[Iterable[Hashable]], ground: Optional[Iterable[Hashable]] = None):
        """Creates a partition from a collection of blocks.

        :param blocks: an iterable of iterables of hashable elements
        :param ground: the ground set being partitioned; defaults to the union of the blocks

        Raises InvalidPartitionException if a block is empty, if an element occurs
        in two blocks, or if the blocks do not cover exactly the ground set.
        """
        blockof, seen = {}, []
        for items in blocks:
            items = list(items)
            block = frozenset(items)
            if len(block) == 0:
                raise InvalidPartitionException("Partition blocks must be non-empty.")
            for x in block:
                if x in blockof:
                    raise InvalidPartitionException(f"Element {x!r} occurs in more than one block.")
                blockof[x] = block
            seen.extend(items)
        if ground is None:
            ground = seen
        ground = tuple(dict.fromkeys(ground))
        groundset = frozenset(ground)
        for x in blockof:
            if x not in groundset:
                raise InvalidPartitionException(f"Element {x!r} is not in the ground set.")
        for x in ground:
            if x not in blockof:
                raise InvalidPartitionException(f"Ground element {x!r} is in no block.")
        self._ground = ground
        self._groundset = groundset
        self._blockof = blockof
        self._blocks = frozenset(blockof.values())

    @classmethod
    def discrete(cls, ground: Iterable[Hashable]) -> 'Partition':
        """The finest partition: every element in a block of its own."""
        ground = tuple(ground)
        return cls(([x] for x in ground), ground)

    @classmethod
    def indiscrete(cls, ground: Iterable[Hashable]) -> 'Partition':
        """The coarsest partition: a single block holding the whole ground set."""
        ground = tuple(ground)
        return cls([ground] if ground else [], ground)

    @classmethod
    def from_kernel(cls, ground: Iterable[Hashable], kernel: Callable[[Any], Hashable]) -> 'Partition':
        """Group the elements of ground by the value of kernel(x)."""
        ground = tuple(ground)
        d = {}
        for x in ground:
            d.setdefault(kernel(x), []).append(x)
        return cls(d.values(), ground)

    @classmethod
    def coerce(cls, p, ground: Optional[Iterable[Hashable]] = None) -> 'Partition':
        """Return p as a Partition, building one from raw blocks if needed."""
        if isinstance(p, Partition):
            if ground is not None and frozenset(ground) != p._groundset:
                raise MismatchedGroundSetException(p.ground, tuple(ground))
            return p
        return cls(p, ground)

    # ==================
    # Accessors
    # ==================

    @property
    def ground(self) -> Tuple[Hashable, ...]:
        """The ground set, in order of first appearance."""
        return self._ground

    @property
    def blocks(self) -> Tuple[FrozenSet[Hashable], ...]:
        """The blocks, ordered by the position of their earliest element in the ground set."""
        first = {}
        for x in self._ground:
            first.setdefault(self._blockof[x], len(first))
        return tuple(sorted(self._blocks, key=first.__getitem__))

    def block_of(self, x: Hashable) -> FrozenSet[Hashable]:
        """The block containing x. Raises KeyError if x is not in the ground set."""
        return self._blockof[x]

    def same_block(self, x: Hashable, y: Hashable) -> bool:
        return self._blockof[x] == self._blockof[y]

    def aslists(self) -> List[List[Hashable]]:
        """Blocks as lists, both levels in ground set order."""
        return [[x for x in self._ground if x in b] for b in self.blocks]

    # ==================
    # Order and lattice operations
    # ==================

    def _check_ground(self, other: 'Partition'):
        if self._groundset != other._groundset:
            raise MismatchedGroundSetException(self._ground, other._ground)

    def refines(self, other: 'Partition') -> bool:
        """True if every block of self is contained in some block of other."""
        self._check_ground(other)
        return all(block <= other._blockof[next(iter(block))] for block in self._blocks)

    def join(self, other: 'Partition') -> 'Partition':
        """The coarsest partition refined by both self and other (least upper bound).
           Elements sharing a block in either partition end up in the same block:
           the blocks are the connected components of the co-membership graph."""
        self._check_ground(other)
        ds = DisjointSet(self._ground)
        for block in self._blocks | other._blocks:
            ds.union_all(block)
        return Partition(ds.classes(), self._ground)

    def meet(self, other: 'Partition') -> 'Partition':
        """The finest partition refining both self and other (greatest lower bound)."""
        self._check_ground(other)
        return Partition.from_kernel(self._ground, lambda x: (self._blockof[x], other._blockof[x]))

    # ==================
    # Magic Methods
    # ==================

    def __len__(self):
        """Return the number of blocks."""
        return len(self._blocks)

    def __iter__(self) -> Iterator[FrozenSet[Hashable]]:
        return iter(self.blocks)

    def __contains__(self, x):
        """Ground set membership."""
        return x in self._groundset

    def __eq__(self, other):
        if not isinstance(other, Partition):
            return NotImplemented
        return self._blocks == other._blocks

    def __hash__(self):
        return hash(self._blocks)

    def __le__(self, other):
        """Refinement."""
        if not isinstance(other, Partition):
            return NotImplemented
        return self.refines(other)

    def __lt__(self, other):
        """Strict refinement."""
        if not isinstance(other, Partition):
            return NotImplemented
        return self.refines(other) and self._blocks != other._blocks

    def __ge__(self, other):
        if not isinstance(other, Partition):
            return NotImplemented
        return other.refines(self)

    def __gt__(self, other):
        if not isinstance(other, Partition):
            return NotImplemented
        return other.refines(self) and self._blocks != other._blocks

    def __or__(self, other):
        """Join."""
        if not isinstance(other, Partition):
            return NotImplemented
        return self.join(other)

    def __and__(self, other):
        """Meet."""
        if not isinstance(other, Partition):
            return NotImplemented
        return self.meet(other)

    def __str__(self):
        return '[' + ', '.join('[' + ', '.join(str(x) for x in b) + ']' for b in self.aslists()) + ']'

    def __repr__(self):
        return f"Partition({self.aslists()!r})"

# ==================
# Global Functions
# ==================
def _ground(ground):
    return None if ground is None else tuple(ground)

def refines(p, q, ground = None) -> bool:
    """True if p is at least as fine as q. Either may be a Partition or raw blocks."""
    ground = _ground(ground)
    return Partition.coerce(p, ground).refines(Partition.coerce(q, ground))

def join(p, q, ground = None) -> Partition:
    ground = _ground(ground)
    return Partition.coerce(p, ground).join(Partition.coerce(q, ground))

def meet(p, q, ground = None) -> Partition:
    ground = _ground(ground)
    return Partition.coerce(p, ground).meet(Partition.coerce(q, ground))
