from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple


class TourInvariantError(AssertionError):
    """Raised when an edge set cannot be assembled into a single Hamiltonian cycle."""


def reconstruct_cycle(edges: Iterable[Tuple[int, int]], n: int) -> List[int]:
    """Walk an undirected edge set that forms one cycle, starting from node 0.

    Every node must appear in exactly two edges. The returned cycle is closed,
    i.e. it has ``n + 1`` entries and ends where it starts.
    """
    adjacency: List[List[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    for node, neighbours in enumerate(adjacency):
        if len(neighbours) != 2:
            raise TourInvariantError(
                f"Node {node} has {len(neighbours)} neighbours in the accepted edge set, expected 2."
            )

    cycle: List[int] = []
    seen = set()
    current, previous = 0, -1
    for _ in range(n):
        if current in seen:
            raise TourInvariantError(f"Accepted edges close a sub-cycle before visiting all {n} nodes.")
        cycle.append(current)
        seen.add(current)
        first, second = adjacency[current]
        following = second if first == previous else first
        previous, current = current, following

    cycle.append(cycle[0])
    return cycle


def rotate_cycle(cycle: Sequence[int], start: int) -> List[int]:
    """Rotate a closed cycle so that it begins and ends at ``start``, keeping direction."""
    core = list(cycle[:-1])
    if start not in core:
        raise ValueError(f"Node {start} is not on the cycle.")
    offset = core.index(start)
    rotated = core[offset:] + core[:offset]
    rotated.append(rotated[0])
    return rotated


__all__ = ["TourInvariantError", "reconstruct_cycle", "rotate_cycle"]
