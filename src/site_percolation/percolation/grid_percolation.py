"""
Core site percolation on an n-by-n grid.

Sites are opened one at a time and the grid percolates once an open path
joins row 1 to row n. Connectivity is tracked with a weighted quick-union
over the n*n sites. Fullness (reachability from row 1) is stored as a flag
carried on the current root of each component, so a bottom-row component
is never marked full unless it actually reaches the top. This avoids the
backwash artifact of the two-virtual-node formulation.
"""

import numbers

import numpy as np

from .union_find import WeightedQuickUnionUF


class InvalidArgument(ValueError):
    """Raised for a non-positive grid size or an out-of-range site."""


def is_integer(value) -> bool:
    """True for Python and numpy integers, but not bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Percolation:
    """
    Connectivity tracker for an n-by-n grid of blocked/open sites.

    Rows and columns are 1-indexed. Sites only ever open, components only
    ever merge, and a full component stays full.

    Example:
        perc = Percolation(3)
        perc.open(1, 2)
        perc.open(2, 2)
        perc.open(3, 2)
        perc.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Initialize a grid with all sites blocked.

        Args:
            n: Grid size (number of rows and columns)
        """
        if not is_integer(n) or n <= 0:
            raise InvalidArgument(f"n: {n}")

        self._n = int(n)
        self._grid = np.zeros((self._n, self._n), dtype=bool)
        self._uf = WeightedQuickUnionUF(self._n * self._n)
        self._full = np.zeros(self._n * self._n, dtype=bool)
        self._open_count = 0

    def __repr__(self) -> str:
        return (f"Percolation(n={self._n}, open_sites={self._open_count}, "
                f"percolates={self.percolates()})")

    @property
    def n(self) -> int:
        return self._n

    # --- Coordinates ---

    def _is_valid_index(self, index: int) -> bool:
        return is_integer(index) and 1 <= index <= self._n

    def _validate_site(self, row: int, col: int) -> None:
        if not self._is_valid_index(row):
            raise InvalidArgument(f"row: {row}")
        if not self._is_valid_index(col):
            raise InvalidArgument(f"col: {col}")

    def _site_index(self, row: int, col: int) -> int:
        """Map 1-indexed (row, col) to a dense index in [0, n*n)."""
        return (row - 1) * self._n + (col - 1)

    def _neighbors(self, row: int, col: int):
        """Yield in-bounds neighbors as (row, col): up, down, left, right."""
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self._is_valid_index(r) and self._is_valid_index(c):
                yield r, c

    # --- Fullness ---

    def _component_is_full(self, index: int) -> bool:
        return bool(self._full[index] or self._full[self._uf.find(index)])

    def _mark_full(self, index: int) -> None:
        self._full[index] = True
        self._full[self._uf.find(index)] = True

    # --- Public API ---

    def open(self, row: int, col: int) -> None:
        """
        Open a site and merge it with its open neighbors.

        Opening an already open site has no effect.

        Args:
            row: Row in [1, n]
            col: Column in [1, n]
        """
        self._validate_site(row, col)
        if self._grid[row - 1, col - 1]:
            return

        self._grid[row - 1, col - 1] = True
        self._open_count += 1

        site = self._site_index(row, col)
        if row == 1:
            self._mark_full(site)

        for r, c in self._neighbors(row, col):
            if not self._grid[r - 1, c - 1]:
                continue
            neighbor = self._site_index(r, c)

            # Read both sides before the union since it may move the root
            full_before = self._component_is_full(site) or self._component_is_full(neighbor)
            self._uf.union(site, neighbor)
            if full_before:
                self._mark_full(site)

    def is_open(self, row: int, col: int) -> bool:
        self._validate_site(row, col)
        return bool(self._grid[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """
        Check whether a site is open and connected to row 1 through open sites.

        Args:
            row: Row in [1, n]
            col: Column in [1, n]

        Returns:
            True if the site is full
        """
        self._validate_site(row, col)
        if not self._grid[row - 1, col - 1]:
            return False
        return self._component_is_full(self._site_index(row, col))

    def percolates(self) -> bool:
        """True if any site in the bottom row is full."""
        bottom = self._n
        for col in range(1, self._n + 1):
            if self._grid[bottom - 1, col - 1] and self.is_full(bottom, col):
                return True
        return False

    def number_of_open_sites(self) -> int:
        return self._open_count
