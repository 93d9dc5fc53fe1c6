# https://en.wikipedia.org/wiki/Disjoint-set_data_structure

import collections
from typing import FrozenSet, List, Tuple


class InvalidVertexId(IndexError):
    pass


class DisjointSet:
    """Union-find over the dense ids [0, n).

    By default neither path compression nor union by rank is applied: union
    always hangs the second root under the first. Either can be switched on,
    neither changes which edges Kruskal accepts.
    """

    def __init__(
        self, n: int, path_compression: bool = False, union_by_rank: bool = False
    ):
        if n < 0:
            raise ValueError(f"Element count must be zero or positive, got {n}")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.path_compression = path_compression
        self.union_by_rank = union_by_rank

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, e: int):
        if not isinstance(e, int) or not 0 <= e < len(self.parent):
            raise InvalidVertexId(f"{e!r} is not in [0, {len(self.parent)})")

    def find(self, e: int) -> int:
        self._check(e)
        root = e
        while self.parent[root] != root:
            root = self.parent[root]
        if self.path_compression:
            while self.parent[e] != root:
                self.parent[e], e = root, self.parent[e]
        return root

    # x's root becomes the parent of y's root
    def union(self, x: int, y: int):
        x, y = self.find(x), self.find(y)
        if x == y:
            return  # already in the same set
        if self.union_by_rank:
            if self.rank[x] < self.rank[y]:
                x, y = y, x
            if self.rank[x] == self.rank[y]:
                self.rank[x] += 1
        self.parent[y] = x

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def sets(self) -> FrozenSet[FrozenSet[int]]:
        sets = collections.defaultdict(set)
        for e in range(len(self.parent)):
            sets[self.find(e)].add(e)
        return frozenset(frozenset(s) for s in sets.values())

    def sorted(self) -> Tuple[Tuple[int, ...], ...]:
        """Sorted tuple of sorted tuples edition of sets()."""
        return tuple(sorted(tuple(sorted(s)) for s in self.sets()))
