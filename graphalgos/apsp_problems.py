"""Problems answered from an all-pairs shortest path table."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .apsp import floyd_warshall


def least_reachable_cities(
    n: int, edges: Iterable[Sequence[float]], threshold: float
) -> list[int]:
    """Cities that reach the fewest others within ``threshold``, ascending.

    ``edges`` are undirected ``(u, v, w)`` roads on cities ``1..n``.
    """
    paths = floyd_warshall(n, edges, undirected=True)
    counts = {
        city: sum(
            1
            for other in range(1, n + 1)
            if other != city and paths.distance(city, other) <= threshold
        )
        for city in range(1, n + 1)
    }
    fewest = min(counts.values(), default=None)
    return [city for city, count in counts.items() if count == fewest]


def path_through_pair(
    n: int,
    edges: Iterable[Sequence[float]],
    first: int,
    second: int,
    source: int,
    target: int,
) -> tuple[float, list[int]] | None:
    """Shortest walk from ``source`` to ``target`` visiting both given vertices.

    Both visiting orders are tried; on a tie the order ``second`` then
    ``first`` is taken. Returns ``(weight, vertices)``, or None when neither
    order gives a path. ``edges`` are undirected ``(u, v, w)``.
    """
    paths = floyd_warshall(n, edges, undirected=True)
    legs_a = (source, first, second, target)
    legs_b = (source, second, first, target)

    def weight(order: tuple[int, ...]) -> float:
        return sum(paths.distance(a, b) for a, b in zip(order, order[1:]))

    weight_a = weight(legs_a)
    weight_b = weight(legs_b)
    if weight_a == math.inf and weight_b == math.inf:
        return None
    order, total = (legs_a, weight_a) if weight_a < weight_b else (legs_b, weight_b)
    route = [source]
    for a, b in zip(order, order[1:]):
        route.extend(paths.path(a, b)[1:])
    return total, route


def has_negative_cycle(n: int, edges: Iterable[Sequence[float]]) -> bool:
    """Tell whether the undirected graph on ``1..n`` has a negative cycle."""
    paths = floyd_warshall(n, edges, undirected=True)
    return any(paths.distance(i, i) < 0 for i in range(1, n + 1))