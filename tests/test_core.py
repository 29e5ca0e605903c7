from __future__ import annotations

import numpy as np
import pytest

from conftest import assert_valid_tour, random_symmetric_matrix
from SmallTSP import Method, SmallTSP, build_report, format_tour, get_solver
from SmallTSP.solvers import SOLVER_REGISTRY


def test_registry_covers_every_method():
    assert set(SOLVER_REGISTRY) == {method.value for method in Method}
    for method in Method:
        assert get_solver(method.value).name == method.value


def test_unknown_solver_name():
    with pytest.raises(KeyError):
        get_solver("held_karp")


def test_unknown_method_string():
    with pytest.raises(ValueError):
        SmallTSP().solve(np.ones((3, 3)) - np.eye(3), method="held_karp")


@pytest.mark.parametrize("method", list(Method))
def test_every_method_returns_a_closed_permutation(method):
    graph = random_symmetric_matrix(9, seed=17)
    result = SmallTSP().solve(graph, method=method, start=3, rng=np.random.default_rng(0))
    assert_valid_tour(result.path, 9)
    assert result.name == method.value
    assert result.status == "complete"


def test_method_accepts_plain_strings(triangle):
    result = SmallTSP().solve(triangle.tolist(), method="greedy", start=0)
    assert result.path == [0, 1, 2, 0]


def test_nearest_neighbor_ignores_start():
    graph = random_symmetric_matrix(5, seed=2)
    result = SmallTSP().solve(graph, method=Method.NEAREST_NEIGHBOR, start=99, rng=np.random.default_rng(1))
    assert_valid_tour(result.path, 5)


def test_annealing_uses_the_seed():
    graph = random_symmetric_matrix(8, seed=6)
    first = SmallTSP().solve(graph, method=Method.SIMULATED_ANNEALING, start=1, seed=5)
    second = SmallTSP().solve(graph, method=Method.SIMULATED_ANNEALING, start=1, seed=5)
    assert first.metadata["seed"] == 5
    assert first.steps == second.steps


@pytest.mark.parametrize("graph", [np.zeros((1, 1)), np.zeros((2, 3)), np.zeros(4)])
def test_rejects_degenerate_shapes(graph):
    with pytest.raises(ValueError):
        SmallTSP().solve(graph)


@pytest.mark.parametrize("start", [-1, 3])
def test_rejects_out_of_range_start(triangle, start):
    with pytest.raises(ValueError, match="Start node"):
        SmallTSP().solve(triangle, method=Method.GREEDY, start=start)


def test_format_tour_uses_one_based_labels(triangle):
    assert format_tour(triangle, [0, 1, 2, 0]) == "1 → 2 → 3 → 1\nTotal length: 6.00"
    assert format_tour(triangle, []) == ""


def test_report_for_two_node_greedy():
    graph = np.array([[0.0, 5.0], [5.0, 0.0]])
    result = SmallTSP().solve(graph, method=Method.GREEDY, start=0)
    assert build_report(graph, result) == (
        "1 → 2 → 1\n"
        "Total length: 10.00\n"
        "Iterations: 1\n"
        "Time Complexity (iterations): count of edges examined\n"
        "Total iterations: 1\n"
    )


def test_report_lists_trace_before_complexity_note():
    graph = random_symmetric_matrix(25, seed=25)
    result = SmallTSP().solve(graph, method=Method.SIMULATED_ANNEALING, start=0)
    report = build_report(graph, result).splitlines()
    assert report[2] == f"Iterations: {result.iterations}"
    assert report[3:3 + len(result.steps)] == result.steps
    assert report[-2] == "Time Complexity (iterations): SA loop count"
    assert report[-1] == f"Total iterations: {result.iterations:,}"
