"""All-pairs shortest paths: Floyd-Warshall and Johnson's reweighting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .sssp import bellman_ford, dijkstra


@dataclass(frozen=True)
class ShortestPaths:
    """Distance and predecessor matrices over the vertices ``1..n``.

    Row and column 0 are unused. ``parent[u][v]`` is the vertex before ``v``
    on the best known path from ``u``, or 0 when there is none.
    """

    n: int
    dist: list[list[float]] = field(repr=False)
    parent: list[list[int]] = field(repr=False)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.n:
            raise IndexError(f"vertex {x} is outside 1..{self.n}")

    def distance(self, u: int, v: int) -> float:
        """Shortest distance from ``u`` to ``v``; ``math.inf`` if unreachable."""
        self._check(u)
        self._check(v)
        return self.dist[u][v]

    def predecessor(self, u: int, v: int) -> int | None:
        """Vertex before ``v`` on the shortest path from ``u``, or None."""
        self._check(u)
        self._check(v)
        return self.parent[u][v] or None

    def path(self, u: int, v: int) -> list[int]:
        """Vertices of the shortest path from ``u`` to ``v``, both included."""
        if self.distance(u, v) == math.inf:
            raise ValueError(f"no path from {u} to {v}")
        route = [v]
        current = v
        while current != u:
            current = self.parent[u][current]
            if current == 0 or len(route) > self.n:
                raise ValueError(f"no well-defined path from {u} to {v}")
            route.append(current)
        route.reverse()
        return route


def floyd_warshall(
    n: int, edges: Iterable[Sequence[float]], undirected: bool = False
) -> ShortestPaths:
    """Run Floyd-Warshall over ``(u, v, w)`` edges on vertices ``1..n``.

    A later edge between the same pair replaces an earlier one.
    """
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")
    dist: list[list[float]] = [[math.inf] * (n + 1) for _ in range(n + 1)]
    parent = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dist[i][i] = 0
    for u, v, w in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"edge endpoint {vertex} is outside 1..{n}")
        dist[u][v] = w
        parent[u][v] = u
        if undirected:
            dist[v][u] = w
            parent[v][u] = v

    vertices = range(1, n + 1)
    for k in vertices:
        row_k = dist[k]
        parent_k = parent[k]
        for i in vertices:
            d_ik = dist[i][k]
            if d_ik == math.inf:
                continue
            row_i = dist[i]
            parent_i = parent[i]
            for j in vertices:
                through = d_ik + row_k[j]
                if through < row_i[j]:
                    row_i[j] = through
                    parent_i[j] = parent_k[j]
    return ShortestPaths(n, dist, parent)


def _format_rows(rows: Iterable[Iterable[str]]) -> str:
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in rows)


def format_distances(paths: ShortestPaths) -> str:
    """Distance matrix as text, ``Inf`` for unreachable pairs."""
    return _format_rows(
        ("Inf" if d == math.inf else str(d) for d in paths.dist[i][1:])
        for i in range(1, paths.n + 1)
    )


def format_predecessors(paths: ShortestPaths) -> str:
    """Predecessor matrix as text, ``Nil`` where there is none."""
    return _format_rows(
        (str(p) if p else "Nil" for p in paths.parent[i][1:])
        for i in range(1, paths.n + 1)
    )


def johnson(
    matrix: Sequence[Sequence[int]],
) -> tuple[list[list[int]], list[list[float]]]:
    """Reweight a 0-based adjacency matrix (0 = no edge) and search it.

    Returns the reweighted matrix and, for every source, the Dijkstra
    distances over the reweighted graph. Raises NegativeCycleError when the
    graph has a negative cycle.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    edges = [
        (i, j, w)
        for i, row in enumerate(matrix)
        for j, w in enumerate(row)
        if w != 0
    ]
    anchor_edges = [(n, i, 0) for i in range(n)]
    potential = bellman_ford(n + 1, [*edges, *anchor_edges], n)

    reweighted = [[0] * n for _ in range(n)]
    adjusted_edges = []
    for i, j, w in edges:
        adjusted = w + potential[i] - potential[j]
        reweighted[i][j] = adjusted
        adjusted_edges.append((i, j, adjusted))

    distances = [dijkstra(n, adjusted_edges, source) for source in range(n)]
    return reweighted, distances