from pypartition.partition import Partition, refines, join, meet
from pypartition.lattice import PartitionLattice
from pypartition.algorithms import set_partitions, bell_number, verify_join
from pypartition.monotone import shares_block, is_monotone, generative_effect, boolean_join
from pypartition._private.exceptions import InvalidPartitionException, MismatchedGroundSetException

__author__     = "Mans Hulden"
__copyright__  = "Copyright 2025"
__credits__    = ["Mans Hulden"]
__license__    = "Apache"
__version__    = "0.1"
__maintainer__ = "Mans Hulden"
__email__      = "mans.hulden@gmail.com"
__status__     = "Prototype"
