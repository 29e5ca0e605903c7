from __future__ import annotations

import pathlib
import re
from typing import Iterable

import numpy as np

MAX_NODES = 25
MIN_NODES = 2
MAX_WEIGHT = 10_000_000
EPSILON = 1e-9

NUMBER_PATTERN = re.compile(r"^(?:0|[1-9]\d*)(?:\.\d+)?$")


class MatrixParseError(ValueError):
    """Raised when text input is not a valid symmetric weight matrix."""


def parse_matrix(lines: Iterable[str]) -> np.ndarray:
    """Parse whitespace-separated rows into a validated ``n x n`` weight matrix.

    Blank lines are ignored. The matrix must be square with ``2 <= n <= 25``,
    hold plain non-negative decimals no larger than ``MAX_WEIGHT``, have a zero
    diagonal, be symmetric, and connect every pair of distinct nodes.
    Row and column numbers in error messages are 1-based.
    """
    rows = [line for line in lines if line.strip()]
    n = len(rows)
    if n == 0:
        raise MatrixParseError("Input is empty. Please enter an n×n matrix.")
    if n > MAX_NODES:
        raise MatrixParseError(f"Matrix size ({n}×{n}) exceeds maximum allowed {MAX_NODES}×{MAX_NODES}.")
    if n < MIN_NODES:
        raise MatrixParseError("At least two nodes are required.")

    graph = np.zeros((n, n), dtype=float)
    tokens_by_row: list[list[str]] = []
    for i, row in enumerate(rows):
        tokens = row.split()
        tokens_by_row.append(tokens)
        if len(tokens) != n:
            raise MatrixParseError(f"In line {i + 1} should be {n} values, found {len(tokens)}.")
        for j, token in enumerate(tokens):
            if not NUMBER_PATTERN.match(token):
                raise MatrixParseError(f"Incorrect number format '{token}' in row {i + 1}, column {j + 1}.")
            value = float(token)
            if value > MAX_WEIGHT:
                raise MatrixParseError(
                    f"Weight {token} in row {i + 1}, column {j + 1} exceeds maximum allowed ({MAX_WEIGHT})."
                )
            graph[i, j] = value

    for i in range(n):
        if abs(graph[i, i]) > EPSILON:
            raise MatrixParseError(f"Diagonal element ({i + 1},{i + 1}) should be zero (found {tokens_by_row[i][i]}).")
        for j in range(i + 1, n):
            if abs(graph[i, j] - graph[j, i]) > EPSILON:
                raise MatrixParseError(f"Matrix is asymmetric at ({i + 1},{j + 1}).")
            if abs(graph[i, j]) < EPSILON:
                raise MatrixParseError(f"No connection between nodes {i + 1} and {j + 1}.")

    return graph


def load_matrix(path: pathlib.Path | str) -> np.ndarray:
    path = pathlib.Path(path)
    with path.open("r", encoding="utf-8") as fh:
        return parse_matrix(fh.read().splitlines())


__all__ = [
    "EPSILON",
    "MAX_NODES",
    "MAX_WEIGHT",
    "MIN_NODES",
    "MatrixParseError",
    "load_matrix",
    "parse_matrix",
]
