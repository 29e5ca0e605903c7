from __future__ import annotations

import pytest

from SmallTSP.utils.cycles import TourInvariantError, reconstruct_cycle, rotate_cycle


def test_reconstruct_walks_from_node_zero():
    edges = [(0, 1), (2, 3), (1, 2), (0, 3)]
    assert reconstruct_cycle(edges, 4) == [0, 1, 2, 3, 0]


def test_reconstruct_follows_first_listed_neighbour():
    edges = [(0, 2), (0, 1), (1, 3), (2, 3)]
    assert reconstruct_cycle(edges, 4) == [0, 2, 3, 1, 0]


def test_reconstruct_rejects_wrong_degree():
    with pytest.raises(TourInvariantError, match="Node 3 has 0 neighbours"):
        reconstruct_cycle([(0, 1), (1, 2), (0, 2)], 4)


def test_reconstruct_rejects_disjoint_subcycles():
    edges = [(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5)]
    with pytest.raises(TourInvariantError, match="sub-cycle"):
        reconstruct_cycle(edges, 6)


def test_invariant_error_is_an_assertion():
    assert issubclass(TourInvariantError, AssertionError)


def test_rotate_keeps_direction_and_closure():
    assert rotate_cycle([0, 1, 2, 3, 0], 2) == [2, 3, 0, 1, 2]
    assert rotate_cycle([0, 3, 1, 2, 0], 0) == [0, 3, 1, 2, 0]
    assert rotate_cycle([4, 0, 1, 4], 1) == [1, 4, 0, 1]


def test_rotate_rejects_unknown_node():
    with pytest.raises(ValueError):
        rotate_cycle([0, 1, 2, 0], 5)
