from __future__ import annotations

import math
import pathlib
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np


def node_positions(n: int, width: float = 550, height: float = 500) -> List[Tuple[float, float]]:
    """Place ``n`` nodes evenly on a circle centred in a ``width x height`` canvas."""
    radius = min(width, height) * 0.4
    cx, cy = width / 2.0, height / 2.0
    positions = []
    for i in range(n):
        angle = 2 * math.pi * i / n
        positions.append((cx + math.cos(angle) * radius, cy + math.sin(angle) * radius))
    return positions


def build_graph(dist_matrix: np.ndarray) -> nx.Graph:
    dist_matrix = np.asarray(dist_matrix, dtype=float)
    n = dist_matrix.shape[0]
    graph = nx.Graph()
    graph.add_nodes_from(range(n))
    for i in range(n):
        for j in range(i + 1, n):
            graph.add_edge(i, j, weight=float(dist_matrix[i, j]))
    return graph


def tour_edges(tour: Sequence[int]) -> List[Tuple[int, int]]:
    return [(tour[k], tour[k + 1]) for k in range(len(tour) - 1)]


def draw_tour(
    dist_matrix: np.ndarray,
    tour: Sequence[int] | None = None,
    ax: plt.Axes | None = None,
    width: float = 550,
    height: float = 500,
) -> plt.Axes:
    """Draw the complete graph in light grey with the tour (if any) overlaid in red."""
    graph = build_graph(dist_matrix)
    if ax is None:
        _, ax = plt.subplots(figsize=(width / 100.0, height / 100.0))

    pos: Dict[int, Tuple[float, float]] = dict(enumerate(node_positions(graph.number_of_nodes(), width, height)))
    nx.draw_networkx_edges(graph, pos, ax=ax, edge_color="lightgray", width=1.0)
    if tour:
        nx.draw_networkx_edges(graph, pos, ax=ax, edgelist=tour_edges(tour), edge_color="red", width=2.0)
    nx.draw_networkx_nodes(graph, pos, ax=ax, node_color="white", edgecolors="black", node_size=400)
    nx.draw_networkx_labels(graph, pos, ax=ax, labels={node: str(node + 1) for node in graph.nodes}, font_size=10)

    # Canvas coordinates grow downwards.
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    return ax


def save_tour_figure(dist_matrix: np.ndarray, tour: Sequence[int], path: pathlib.Path | str) -> pathlib.Path:
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(5.5, 5.0))
    draw_tour(dist_matrix, tour, ax=ax)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


__all__ = ["build_graph", "draw_tour", "node_positions", "save_tour_figure", "tour_edges"]
