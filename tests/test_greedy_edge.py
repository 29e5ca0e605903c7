from __future__ import annotations

import numpy as np
import pytest

from conftest import assert_valid_tour, random_symmetric_matrix
from SmallTSP.solvers import compute_tour_cost
from SmallTSP.solvers.heuristics.greedy_edge import GreedyEdgeSolver, sorted_edges
from SmallTSP.utils.cycles import rotate_cycle


def test_two_nodes_returns_trivial_tour():
    graph = np.array([[0.0, 5.0], [5.0, 0.0]])
    result = GreedyEdgeSolver().solve(graph, start=0)
    assert result.path == [0, 1, 0]
    assert result.iterations == 1
    assert result.cost == pytest.approx(10.0)
    assert result.steps == []


def test_two_nodes_from_second_start():
    graph = np.array([[0.0, 5.0], [5.0, 0.0]])
    assert GreedyEdgeSolver().solve(graph, start=1).path == [1, 0, 1]


def test_triangle_accepts_every_edge(triangle):
    assert sorted_edges(triangle) == [(0, 1, 1.0), (0, 2, 2.0), (1, 2, 3.0)]
    result = GreedyEdgeSolver().solve(triangle, start=0)
    assert result.path == [0, 1, 2, 0]
    assert result.iterations == 3
    assert result.cost == pytest.approx(6.0)


def test_stops_once_closing_edge_is_accepted(square):
    result = GreedyEdgeSolver().solve(square, start=2)
    assert result.metadata["accepted_edges"] == [(0, 1), (1, 2), (2, 3), (0, 3)]
    assert result.iterations == 4
    assert result.metadata["edges_total"] == 6
    assert result.path == [2, 3, 0, 1, 2]
    assert result.cost == pytest.approx(10.0)


def test_rejects_premature_cycle():
    graph = np.full((4, 4), 10.0)
    np.fill_diagonal(graph, 0.0)
    for u, v in [(0, 1), (1, 2), (0, 2)]:
        graph[u, v] = graph[v, u] = 1.0
    result = GreedyEdgeSolver().solve(graph, start=0)
    assert result.metadata["accepted_edges"] == [(0, 1), (0, 2), (1, 3), (2, 3)]
    assert result.path == [0, 1, 3, 2, 0]
    assert result.iterations == 6
    assert result.cost == pytest.approx(22.0)


def test_equal_weights_break_ties_lexicographically():
    graph = np.ones((4, 4)) - np.eye(4)
    result = GreedyEdgeSolver().solve(graph, start=0)
    assert result.metadata["accepted_edges"] == [(0, 1), (0, 2), (1, 3), (2, 3)]
    assert result.path == [0, 1, 3, 2, 0]


@pytest.mark.parametrize("n", [3, 5, 8, 13, 25])
def test_random_matrices_give_valid_tours(n):
    graph = random_symmetric_matrix(n, seed=n)
    result = GreedyEdgeSolver().solve(graph, start=n // 2)
    assert_valid_tour(result.path, n)
    assert result.path[0] == n // 2
    assert len(result.metadata["accepted_edges"]) == n
    assert n <= result.iterations <= n * (n - 1) // 2
    assert result.cost == pytest.approx(compute_tour_cost(graph, result.path))


@pytest.mark.parametrize("n", [4, 9, 16])
def test_start_node_only_rotates_the_tour(n):
    graph = random_symmetric_matrix(n, seed=100 + n)
    base = GreedyEdgeSolver().solve(graph, start=0)
    for start in range(n):
        result = GreedyEdgeSolver().solve(graph, start=start)
        assert result.path == rotate_cycle(base.path, start)
        assert result.cost == pytest.approx(base.cost)
        assert result.iterations == base.iterations


def test_is_deterministic():
    graph = random_symmetric_matrix(12, seed=7)
    first = GreedyEdgeSolver().solve(graph, start=3)
    second = GreedyEdgeSolver().solve(graph, start=3)
    assert first.path == second.path
    assert first.iterations == second.iterations


@pytest.mark.parametrize("n, start", [(2, 5), (2, -1), (4, 4), (4, -1)])
def test_rejects_start_outside_graph(n, start):
    graph = random_symmetric_matrix(n, seed=n)
    with pytest.raises(ValueError, match="Start node"):
        GreedyEdgeSolver().solve(graph, start=start)
