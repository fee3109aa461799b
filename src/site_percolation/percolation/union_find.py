"""
Array-backed weighted quick-union with path compression.

Each element is an integer index in [0, n). Components only ever merge,
which matches the monotone opening of sites in a percolation grid.
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Disjoint-set over n integer elements.

    Union is weighted by component size and find applies path halving, giving
    near-constant amortized cost per operation. The root chosen by union()
    depends on component sizes, so callers must re-query find() after a union
    rather than assume either original root survived.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton components.

        Args:
            n: Number of elements
        """
        if n <= 0:
            raise ValueError(f"n must be > 0, got {n}")

        self.n = n
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)
        self._count = n

    def __len__(self) -> int:
        return self.n

    @property
    def count(self) -> int:
        """Number of components."""
        return self._count

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.n:
            raise IndexError(f"index {p} is not between 0 and {self.n - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the component containing p.

        Args:
            p: Element index

        Returns:
            Root index
        """
        self._validate(p)
        parent = self.parent
        while parent[p] != p:
            # Path halving
            parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> int:
        """
        Merge the components containing p and q.

        Args:
            p: First element
            q: Second element

        Returns:
            Root of the merged component
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return root_p

        # Smaller tree goes under the larger one; ties go under q's root
        if self.size[root_p] <= self.size[root_q]:
            self.parent[root_p] = root_q
            self.size[root_q] += self.size[root_p]
            root = root_q
        else:
            self.parent[root_q] = root_p
            self.size[root_p] += self.size[root_q]
            root = root_p

        self._count -= 1
        return root

    def component_size(self, p: int) -> int:
        """Number of elements in p's component."""
        return int(self.size[self.find(p)])
