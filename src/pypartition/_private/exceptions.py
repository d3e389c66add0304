class InvalidPartitionException(ValueError):
    """Raised when a collection of blocks is not a partition of its ground set."""
    pass


class MismatchedGroundSetException(ValueError):
    """Raised when two partitions of different ground sets are compared or combined."""

    def __init__(self, left, right):
        self.left, self.right = left, right
        super().__init__(f"Partitions are over different ground sets: {set(left)} vs. {set(right)}")
