"""Monotone boolean maps on partitions and their generative effects.

A map phi from partitions to booleans (ordered false <= true) is monotone if
P <= Q implies phi(P) <= phi(Q). Monotone maps always satisfy
phi(P) or phi(Q) <= phi(P | Q), but need not satisfy it with equality: when
phi(P | Q) is true although phi(P) and phi(Q) are both false, joining P and Q
has produced something neither had on its own. This is a generative effect."""

from typing import TYPE_CHECKING, Callable, Hashable

from pypartition.partition import Partition

if TYPE_CHECKING:
    from .lattice import PartitionLattice


def boolean_join(a: bool, b: bool) -> bool:
    """Join in the two-element lattice false <= true."""
    return a or b


def shares_block(x: Hashable, y: Hashable) -> Callable[[Partition], bool]:
    """Return phi with phi(P) true iff x and y are in the same block of P."""
    def phi(partition: Partition) -> bool:
        return partition.same_block(x, y)
    phi.__name__ = f"shares_block({x!r}, {y!r})"
    return phi


def is_monotone(phi: Callable[[Partition], bool], lattice: 'PartitionLattice') -> bool:
    """Check phi(P) <= phi(Q) along every cover edge P <= Q of lattice.
       The covers generate the refinement order, so this checks all of it."""
    values = [phi(p) for p in lattice]
    return all(values[i] <= values[j] for i, j in lattice.covers())


class GenerativeEffect:
    """phi evaluated on two partitions and on their join."""

    __slots__ = ['p', 'q', 'join', 'phi_p', 'phi_q', 'phi_join']

    def __init__(self, phi: Callable[[Partition], bool], p: Partition, q: Partition):
        self.p, self.q, self.join = p, q, p.join(q)
        self.phi_p, self.phi_q, self.phi_join = phi(p), phi(q), phi(self.join)

    @property
    def inequality_holds(self) -> bool:
        """phi(P) or phi(Q) <= phi(P | Q)"""
        return boolean_join(self.phi_p, self.phi_q) <= self.phi_join

    @property
    def generative(self) -> bool:
        """True if the join produces more than the separate parts did."""
        return boolean_join(self.phi_p, self.phi_q) < self.phi_join

    def __str__(self):
        return (f"Φ(A) = {self.phi_p}, Φ(B) = {self.phi_q}, Φ(A ∨ B) = {self.phi_join}\n"
                f"Φ(A) ∨ Φ(B) ≤ Φ(A ∨ B): {self.inequality_holds}")


def generative_effect(phi: Callable[[Partition], bool], p, q, ground = None) -> GenerativeEffect:
    """Evaluate phi on p, q and p | q. p and q may be Partitions or raw blocks."""
    ground = None if ground is None else tuple(ground)
    return GenerativeEffect(phi, Partition.coerce(p, ground), Partition.coerce(q, ground))
