from __future__ import annotations


class DisjointSetForest:
    """Union-find over node indices ``0..n-1`` with path compression."""

    def __init__(self, n: int):
        self.parent = list(range(n))

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Second pass repoints every node on the path straight at the root.
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_a] = root_b
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


__all__ = ["DisjointSetForest"]
