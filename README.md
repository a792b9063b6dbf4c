# graphalgos

Classic graph algorithms in plain Python, with no dependencies beyond the
standard library.

- `graphalgos.disjoint_set`: `DisjointSet`, union-find over the elements
  `0..n` with union by rank and path compression (`find`, `union`,
  `connected`).
- `graphalgos.sssp`: single-source shortest paths. `bellman_ford` raises
  `NegativeCycleError` (a `ValueError`) when a negative cycle is reachable;
  `dijkstra` handles non-negative weights; `min_toll_cost` finds the cheapest
  route from city 1 to city N when each city charges a toll on entry.
  Unreachable vertices get `math.inf`.
- `graphalgos.apsp`: all-pairs shortest paths. `floyd_warshall` returns a
  `ShortestPaths` object with `distance`, `predecessor` and `path` queries;
  `format_distances` and `format_predecessors` render its matrices as text
  (`Inf` and `Nil` for missing entries). `johnson` takes a 0-based weight
  matrix (0 meaning no edge), reweights it with Bellman-Ford potentials and
  returns the reweighted matrix together with the Dijkstra distances over
  the reweighted graph from every source.
- `graphalgos.apsp_problems`: `least_reachable_cities`, `path_through_pair`
  and `has_negative_cycle`, answered from a Floyd-Warshall table.
- `graphalgos.mst`: `kruskal_edges`, `kruskal_cost`, `prim_cost`,
  `manhattan_mst_cost`, `max_reliability`, `capped_mst_cost`,
  `supply_network_cost` and `operations_to_connect`.
- `graphalgos.bar_chart`: `render_bars`, a text bar chart drawn from the
  highest value down to 1.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

### Disjoint sets

```python
from graphalgos.disjoint_set import DisjointSet

ds = DisjointSet(7)      # elements 0..7
ds.union(1, 2)
ds.union(2, 3)
ds.union(4, 5)
ds.union(6, 7)
ds.union(5, 6)

ds.connected(3, 7)   # False
ds.union(3, 7)
ds.connected(3, 7)   # True
```

Elements outside `0..n` raise `IndexError`.

### Shortest paths from one source

Edges are directed `(u, v, weight)` triples over vertices
`0 .. vertex_count - 1`.

```python
from graphalgos.sssp import NegativeCycleError, bellman_ford, dijkstra

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1)]
dijkstra(4, edges, 0)        # [0, 3, 1, 4]

try:
    bellman_ford(4, edges, 0)
except NegativeCycleError:
    ...
```

### Shortest paths between all pairs

Vertices for `floyd_warshall` are numbered from 1. Pass `undirected=True`
to add every edge in both directions.

```python
from graphalgos.apsp import floyd_warshall, format_distances, johnson

edges = [
    (1, 2, 3), (1, 3, 8), (1, 5, -4), (2, 5, 7), (2, 4, 1),
    (4, 1, 2), (5, 4, 6), (4, 3, -5), (3, 2, 4),
]
paths = floyd_warshall(5, edges, False)
paths.distance(1, 2)
paths.path(1, 2)             # list of vertices from 1 to 2
print(format_distances(paths))

reweighted, distances = johnson([
    [0, -5, 2, 3],
    [0, 0, 4, 0],
    [0, 0, 0, 1],
    [0, 0, 0, 0],
])
```

`ShortestPaths.path` raises `ValueError` when there is no path.

### Minimum spanning trees

```python
from graphalgos.mst import kruskal_cost, manhattan_mst_cost, operations_to_connect

kruskal_cost(3, [(0, 1, 5), (1, 2, 3), (0, 2, 1)])                # 4
manhattan_mst_cost([(0, 0), (2, 2), (3, 10), (5, 2), (7, 0)])     # 20
operations_to_connect(4, [(0, 1), (0, 2), (1, 2)])                # 1
```

`operations_to_connect` raises `ValueError` when there are not enough spare
cables to connect every computer.

## Command-line tools

Installing the package provides two commands. Both read their input as
whitespace-separated numbers from standard input; malformed input ends with
a usage error.

### graphalgos

`graphalgos <command>` solves one problem:

- `floyd`: input `n m` then `m` lines `u v w` (directed, vertices from 1).
  Prints the initial predecessor matrix, then `Shortest distance matrix:`,
  the distance matrix and the final predecessor matrix.
- `toll`: input `n m`, then `n` tolls, then `m` undirected roads `u v`.
  Prints the cheapest toll from city 1 to city `n`, or `2147483647` if it
  cannot be reached.
- `via`: input `n m`, `m` undirected edges `u v w`, two vertices to pass
  through, then the source and target. Prints the path weight and the path,
  or a message that there is no such path.
- `reliability`: input `n m` then `m` links `u v p` with `0 < p <= 1`.
  Prints the largest product of reliabilities over a spanning tree.
- `kruskal`: input `n m` then `m` edges `u v w`. Prints the chosen edges as
  `[u,v,w], ` in the order they are picked.

```
echo "3 3  1 2 4  2 3 1  1 3 7" | graphalgos floyd
```

### graphalgos-bars

Reads a count followed by that many integers and draws them as a vertical
bar chart:

```
echo "4 3 1 2 3" | graphalgos-bars
```