"""
Disjoint-set forest used to reject cycle-forming edges.

Nodes live in a flat arena: node i is represented by slot i of a numpy
array holding the index of its parent. A root is its own parent.
"""

import numpy as np


class DisjointSet:
    """
    Union-find over the integers 0..size-1.

    Uses union by rank and path compression, so a sequence of merges over
    a whole grid runs in effectively linear time.
    """

    def __init__(self, size: int):
        """
        Create size singleton sets.

        Args:
            size: Number of nodes in the arena
        """
        if size < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {size}")
        self.parent = np.arange(size, dtype=np.int64)
        self.rank = np.zeros(size, dtype=np.int8)
        self.components = size

    def __len__(self) -> int:
        return len(self.parent)

    def find_root(self, node: int) -> int:
        """Return the root of the tree containing node."""
        parent = self.parent
        root = node
        while parent[root] != root:
            root = int(parent[root])

        # Point every node on the walked path straight at the root
        while parent[node] != root:
            next_node = int(parent[node])
            parent[node] = root
            node = next_node

        return root

    def try_merge(self, a: int, b: int) -> bool:
        """
        Merge the sets containing a and b.

        Returns:
            True if a and b were in different sets (now joined),
            False if they were already connected
        """
        root_a = self.find_root(a)
        root_b = self.find_root(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

        self.components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Check whether a and b share a root."""
        return self.find_root(a) == self.find_root(b)
