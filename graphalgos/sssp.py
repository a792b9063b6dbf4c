"""Single-source shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


class NegativeCycleError(ValueError):
    """A negative-weight cycle is reachable from the source."""


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[float]:
    """Distances from ``source`` over directed ``(u, v, w)`` edges.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError when a
    negative cycle is reachable.
    """
    edges = [tuple(edge) for edge in edges]
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, w in edges:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    for u, v, w in edges:
        if dist[u] != math.inf and dist[u] + w < dist[v]:
            raise NegativeCycleError("graph contains a negative-weight cycle")
    return dist


def dijkstra(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[float]:
    """Distances from ``source`` over directed non-negative ``(u, v, w)`` edges."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    queue = [(0, source)]
    while queue:
        weight, node = heapq.heappop(queue)
        if weight > dist[node]:
            continue
        for v, w in adjacency[node]:
            if weight + w < dist[v]:
                dist[v] = weight + w
                heapq.heappush(queue, (dist[v], v))
    return dist


def min_toll_cost(
    tolls: Sequence[int], roads: Iterable[Sequence[int]]
) -> float:
    """Cheapest total toll to travel from city 1 to city N.

    ``tolls[i]`` is the toll paid on entering city ``i + 1``; ``roads`` are
    undirected pairs of 1-based cities. Returns ``math.inf`` if city N cannot
    be reached.
    """
    if not tolls:
        raise ValueError("at least one city is required")
    count = len(tolls)
    toll = [0, *tolls]
    adjacency: list[list[int]] = [[] for _ in range(count + 1)]
    for u, v in roads:
        adjacency[u].append(v)
        adjacency[v].append(u)
    cost: list[float] = [math.inf] * (count + 1)
    cost[1] = 0
    queue = [(0, 1)]
    while queue:
        current, city = heapq.heappop(queue)
        if current > cost[city]:
            continue
        for neighbour in adjacency[city]:
            candidate = current + toll[neighbour]
            if candidate < cost[neighbour]:
                cost[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return cost[count]