"""Command-line front end that reads problem input from standard input."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Sequence
from typing import TypeVar

from .apsp import ShortestPaths, floyd_warshall, format_distances, format_predecessors
from .apsp_problems import path_through_pair
from .mst import kruskal_edges, max_reliability
from .sssp import min_toll_cost

_T = TypeVar("_T")

# Reported when the destination city cannot be reached.
_UNREACHABLE_COST = 2147483647


class _Input:
    """Whitespace-separated tokens consumed one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def take(self, convert: Callable[[str], _T] = int) -> _T:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        return convert(token)

    def take_edges(self, count: int, weight: Callable[[str], _T] = int):
        return [(self.take(), self.take(), self.take(weight)) for _ in range(count)]


def _floyd(data: _Input) -> str:
    n, m = data.take(), data.take()
    edges = data.take_edges(m)
    paths = floyd_warshall(n, edges)
    initial = [[0] * (n + 1) for _ in range(n + 1)]
    for u, v, _ in edges:
        initial[u][v] = u
    before = format_predecessors(ShortestPaths(n, [], initial))
    return (
        before
        + "Shortest distance matrix:\n"
        + format_distances(paths)
        + format_predecessors(paths)
    )


def _toll(data: _Input) -> str:
    n, m = data.take(), data.take()
    tolls = [data.take() for _ in range(n)]
    roads = [(data.take(), data.take()) for _ in range(m)]
    cost = min_toll_cost(tolls, roads)
    return f"{_UNREACHABLE_COST if cost == math.inf else cost}\n"


def _via(data: _Input) -> str:
    n, m = data.take(), data.take()
    edges = data.take_edges(m)
    first, second = data.take(), data.take()
    source, target = data.take(), data.take()
    result = path_through_pair(n, edges, first, second, source, target)
    if result is None:
        return f"No path from {source}to {target} through the Wall Street\n"
    weight, route = result
    steps = "".join(f"{vertex} -> " for vertex in route)
    return f"Shortest path weight : {weight}\nPath :{steps}\n"


def _reliability(data: _Input) -> str:
    n, m = data.take(), data.take()
    edges = data.take_edges(m, float)
    return f"{max_reliability(n, edges):g}\n"


def _kruskal(data: _Input) -> str:
    n, m = data.take(), data.take()
    edges = data.take_edges(m)
    chosen = "".join(f"[{u},{v},{w}], " for u, v, w in kruskal_edges(n, edges))
    return chosen + " \n"


_COMMANDS: dict[str, tuple[Callable[[_Input], str], str]] = {
    "floyd": (_floyd, "all-pairs shortest paths with predecessor matrices"),
    "toll": (_toll, "cheapest toll route from city 1 to city N"),
    "via": (_via, "shortest path that passes through two given vertices"),
    "reliability": (_reliability, "most reliable spanning network"),
    "kruskal": (_kruskal, "edges of a minimum spanning tree"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the graph problems on input read from standard input."""
    parser = argparse.ArgumentParser(
        prog="graphalgos",
        description="Solve a graph problem whose input is read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        commands.add_parser(name, help=summary, description=summary)
    args = parser.parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        output = handler(_Input(sys.stdin.read()))
    except (ValueError, IndexError) as exc:
        parser.error(str(exc))
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())