from __future__ import annotations

import numpy as np
import pytest


def random_symmetric_matrix(n: int, seed: int, max_weight: int = 100) -> np.ndarray:
    rng = np.random.default_rng(seed)
    upper = np.triu(rng.integers(1, max_weight + 1, size=(n, n)), k=1).astype(float)
    return upper + upper.T


def assert_valid_tour(tour, n: int) -> None:
    assert len(tour) == n + 1
    assert tour[0] == tour[-1]
    assert sorted(tour[:-1]) == list(range(n))


@pytest.fixture
def triangle() -> np.ndarray:
    return np.array(
        [
            [0.0, 1.0, 2.0],
            [1.0, 0.0, 3.0],
            [2.0, 3.0, 0.0],
        ]
    )


@pytest.fixture
def square() -> np.ndarray:
    # Perimeter 0-1-2-3 costs 1, 2, 3, 4; diagonals cost 5 and 6.
    return np.array(
        [
            [0.0, 1.0, 5.0, 4.0],
            [1.0, 0.0, 2.0, 6.0],
            [5.0, 2.0, 0.0, 3.0],
            [4.0, 6.0, 3.0, 0.0],
        ]
    )
