import io

import pytest

from graphalgos.apsp import floyd_warshall, format_distances, format_predecessors
from graphalgos.apsp_problems import path_through_pair
from graphalgos.cli import main
from graphalgos.mst import kruskal_edges, max_reliability
from graphalgos.sssp import min_toll_cost

FLOYD_INPUT = """5 9
1 2 3
1 3 8
1 5 -4
2 5 7
2 4 1
4 1 2
5 4 6
4 3 -5
3 2 4
"""

FLOYD_EDGES = [
    (1, 2, 3), (1, 3, 8), (1, 5, -4), (2, 5, 7), (2, 4, 1),
    (4, 1, 2), (5, 4, 6), (4, 3, -5), (3, 2, 4),
]

WALL_EDGES = [
    (1, 6, 5), (2, 5, 8), (2, 6, 7), (4, 6, 8),
    (5, 4, 2), (5, 7, 7), (7, 6, 7), (8, 4, 8),
]


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_floyd_prints_initial_then_final_matrices(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, ["floyd"], FLOYD_INPUT)
    assert code == 0
    lines = out.split("\n")
    assert lines[0] == "Nil 1 1 Nil 1 "
    assert lines[5] == "Shortest distance matrix:"
    paths = floyd_warshall(5, FLOYD_EDGES)
    rest = "\n".join(lines[6:])
    assert rest == format_distances(paths) + format_predecessors(paths)


def test_floyd_marks_unreachable(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["floyd"], "2 1\n1 2 4\n")
    assert out == "Nil 1 \nNil Nil \nShortest distance matrix:\n0 4 \nInf 0 \nNil 1 \nNil Nil \n"


def test_toll_matches_library(monkeypatch, capsys):
    text = "3 3\n5 2 7\n1 2\n2 3\n1 3\n"
    code, out = run(monkeypatch, capsys, ["toll"], text)
    assert code == 0
    assert out == f"{min_toll_cost([5, 2, 7], [(1, 2), (2, 3), (1, 3)])}\n"
    assert out == "7\n"


def test_toll_unreachable_reports_int_max(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["toll"], "3 1\n1 1 1\n1 2\n")
    assert out == "2147483647\n"


def test_via_reports_missing_path(monkeypatch, capsys):
    text = "8 8\n" + "".join(f"{u} {v} {w}\n" for u, v, w in WALL_EDGES) + "2 6\n5 3\n"
    _, out = run(monkeypatch, capsys, ["via"], text)
    assert out == "No path from 5to 3 through the Wall Street\n"


def test_via_prints_weight_and_route(monkeypatch, capsys):
    text = "8 8\n" + "".join(f"{u} {v} {w}\n" for u, v, w in WALL_EDGES) + "2 6\n5 8\n"
    _, out = run(monkeypatch, capsys, ["via"], text)
    weight, route = path_through_pair(8, WALL_EDGES, 2, 6, 5, 8)
    lines = out.split("\n")
    assert lines[0] == f"Shortest path weight : {weight}"
    assert lines[1] == "Path :" + "".join(f"{v} -> " for v in route)
    assert route[0] == 5 and route[-1] == 8
    assert 2 in route and 6 in route


def test_reliability_matches_library(monkeypatch, capsys):
    text = "3 3\n0 1 0.5\n1 2 0.5\n0 2 0.25\n"
    _, out = run(monkeypatch, capsys, ["reliability"], text)
    expected = max_reliability(3, [(0, 1, 0.5), (1, 2, 0.5), (0, 2, 0.25)])
    assert out == f"{expected:g}\n"
    assert float(out) == pytest.approx(0.25)


def test_kruskal_lists_chosen_edges(monkeypatch, capsys):
    edges = [(0, 1, 4), (1, 2, 1), (0, 2, 3), (2, 3, 2)]
    text = "3 4\n" + "".join(f"{u} {v} {w}\n" for u, v, w in edges)
    _, out = run(monkeypatch, capsys, ["kruskal"], text)
    chosen = kruskal_edges(3, edges)
    assert out == "".join(f"[{u},{v},{w}], " for u, v, w in chosen) + " \n"
    assert len(chosen) == 3


def test_kruskal_single_edge(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, ["kruskal"], "2 1\n1 2 5\n")
    assert out == "[1,2,5],  \n"


def test_truncated_input_is_an_error(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, capsys, ["floyd"], "3 2\n1 2 4\n")
    assert exc.value.code == 2


def test_bad_number_is_an_error(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, capsys, ["toll"], "x 1\n")
    assert exc.value.code == 2


def test_command_is_required(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, capsys, [], "")
    assert exc.value.code == 2