"""Minimum spanning trees and problems built on them."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

from .disjoint_set import DisjointSet


def _kruskal(
    vertex_count: int, weighted: Iterable[tuple[float, int, int]]
) -> list[tuple[int, int, float]]:
    """Greedy selection over ``(w, u, v)`` triples in ascending order."""
    sets = DisjointSet(vertex_count)
    chosen: list[tuple[int, int, float]] = []
    for w, u, v in sorted(weighted):
        if not sets.connected(u, v):
            sets.union(u, v)
            chosen.append((u, v, w))
    return chosen


def kruskal_edges(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[tuple[int, int, int]]:
    """Edges of a minimum spanning forest, in the order Kruskal picks them.

    ``edges`` are undirected ``(u, v, w)`` with endpoints in ``0..vertex_count``.
    Ties are broken by ``u`` and then ``v``.
    """
    return _kruskal(vertex_count, ((w, u, v) for u, v, w in edges))


def kruskal_cost(vertex_count: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest found by Kruskal."""
    return sum(w for _, _, w in kruskal_edges(vertex_count, edges))


def prim_cost(
    vertex_count: int, adjacency: Sequence[Iterable[Sequence[int]]]
) -> int:
    """Total weight of the minimum spanning tree reachable from vertex 0.

    ``adjacency[u]`` lists ``(v, w)`` pairs for the vertices ``0..vertex_count-1``.
    """
    if vertex_count <= 0:
        return 0
    if len(adjacency) < vertex_count:
        raise ValueError(
            f"adjacency has {len(adjacency)} rows, expected {vertex_count}"
        )
    visited = [False] * vertex_count
    total = 0
    queue: list[tuple[int, int]] = [(0, 0)]
    while queue:
        w, u = heapq.heappop(queue)
        if visited[u]:
            continue
        visited[u] = True
        total += w
        for v, weight in adjacency[u]:
            if not visited[v]:
                heapq.heappush(queue, (weight, v))
    return total


def manhattan_mst_cost(points: Sequence[Sequence[int]]) -> int:
    """Cheapest way to connect all points when a link costs their Manhattan distance."""
    pts = [tuple(p) for p in points]
    weighted = (
        (abs(x1 - x2) + abs(y1 - y2), i, j)
        for i, (x1, y1) in enumerate(pts)
        for j, (x2, y2) in enumerate(pts[i + 1 :], start=i + 1)
    )
    return sum(w for _, _, w in _kruskal(len(pts), weighted))


def max_reliability(n: int, edges: Iterable[Sequence[float]]) -> float:
    """Largest product of link reliabilities over a spanning tree.

    ``edges`` are ``(u, v, p)`` with ``0 < p <= 1``; endpoints lie in ``0..n``.
    """
    weighted = []
    for u, v, p in edges:
        if p <= 0:
            raise ValueError(f"reliability must be positive, got {p}")
        weighted.append((-math.log(p), int(u), int(v)))
    cost = sum(w for _, _, w in _kruskal(n, weighted))
    return math.exp(-cost)


def capped_mst_cost(
    n: int, edges: Iterable[Sequence[float]], cap: float
) -> float:
    """Spanning forest cost when no single link costs more than ``cap``."""
    weighted = ((min(w, cap), int(u), int(v)) for u, v, w in edges)
    return sum(w for _, _, w in _kruskal(n, weighted))


def supply_network_cost(
    supply_costs: Sequence[int], edges: Iterable[Sequence[int]]
) -> int:
    """Cheapest way to supply every vertex, directly or through links.

    ``supply_costs[i]`` is the cost of supplying vertex ``i + 1`` on its own;
    ``edges`` are ``(u, v, w)`` links between 1-based vertices.
    """
    n = len(supply_costs)
    weighted = [(w, 0, i) for i, w in enumerate(supply_costs, start=1)]
    weighted.extend((w, u, v) for u, v, w in edges)
    return sum(w for _, _, w in _kruskal(n, weighted))


def operations_to_connect(n: int, connections: Iterable[Sequence[int]]) -> int:
    """Fewest cable moves that connect all ``n`` computers.

    Raises ValueError when there are not enough redundant cables.
    """
    sets = DisjointSet(n)
    spare = 0
    for u, v in connections:
        if sets.connected(u, v):
            spare += 1
        else:
            sets.union(u, v)
    components = sum(1 for i in range(n) if sets.find(i) == i)
    needed = components - 1
    if needed > spare:
        raise ValueError(
            f"{needed} moves needed but only {spare} spare cables available"
        )
    return needed