#!/usr/bin/env python

class DisjointSet:

    """Basic union-find using dicts, with path compression. Items are the
       elements of a ground set; every item starts out in its own class."""

    def __init__(self, S):
        """Create a new union-find structure where each item of S is a singleton."""
        self.parent = {x:x for x in S}
        self.order = {x:i for i, x in enumerate(self.parent)}

    def find(self, x):
        """Return the representative of the class of x, compressing the path on the way."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x, y):
        """Merge the classes of x and y. The root earliest in S survives."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return rx
        if self.order[ry] < self.order[rx]:
            rx, ry = ry, rx
        self.parent[ry] = rx
        return rx

    def union_all(self, S):
        """Merge the classes of all items in S."""
        it = iter(S)
        first = next(it, None)
        for x in it:
            self.union(first, x)

    def classes(self):
        """Get current classes as a list of lists, in order of first item."""
        groups = {}
        for x in self.parent:
            groups.setdefault(self.find(x), []).append(x)
        return list(groups.values())
