"""Disjoint-set forest with path compression and per-set weights."""


class DisjointSet:
    """Sets over 0..size-1, each carrying a rank that adds up on union."""

    def __init__(self, size, ranks=None):
        if ranks is None:
            ranks = [0] * size
        else:
            ranks = list(ranks)
            if len(ranks) != size:
                raise ValueError(f"expected {size} ranks, got {len(ranks)}")
        self._parent = list(range(size))
        self._rank = ranks
        self._max_rank = max(ranks, default=0)

    def _check(self, item):
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} out of range")

    def find(self, item):
        """Return the representative of item's set."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            parent = self._parent[item]
            self._parent[item] = root
            item = parent
        return root

    def union(self, first, second):
        """Merge the sets of both items into first's set and return its representative."""
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            return first_root
        self._parent[second_root] = first_root
        self._rank[first_root] += self._rank[second_root]
        self._max_rank = max(self._max_rank, self._rank[first_root])
        return first_root

    def max_rank(self):
        """Return the largest rank any set has reached."""
        return self._max_rank