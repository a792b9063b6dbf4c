"""Union-find structure with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements ``0..n`` inclusive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, u: int, v: int) -> None:
        """Merge the sets holding ``u`` and ``v``."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        elif self._rank[root_v] > self._rank[root_u]:
            self._parent[root_u] = root_v
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1

    def connected(self, u: int, v: int) -> bool:
        """Tell whether ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)