"""Tests for the weighted quick-union structure."""

import pytest

from site_percolation.percolation.union_find import WeightedQuickUnionUF


class TestWeightedQuickUnionUF:
    """Tests for WeightedQuickUnionUF."""

    def test_init(self):
        uf = WeightedQuickUnionUF(5)

        assert len(uf) == 5
        assert uf.count == 5
        assert all(uf.find(i) == i for i in range(5))

    @pytest.mark.parametrize("n", [0, -3])
    def test_init_rejects_non_positive(self, n):
        with pytest.raises(ValueError):
            WeightedQuickUnionUF(n)

    def test_find_out_of_range(self):
        uf = WeightedQuickUnionUF(3)

        with pytest.raises(IndexError):
            uf.find(3)
        with pytest.raises(IndexError):
            uf.find(-1)

    def test_union_connects(self):
        uf = WeightedQuickUnionUF(6)
        uf.union(0, 1)
        uf.union(2, 3)
        uf.union(1, 3)

        assert uf.connected(0, 2)
        assert not uf.connected(0, 4)
        assert uf.count == 3
        assert uf.component_size(3) == 4

    def test_union_returns_new_root(self):
        uf = WeightedQuickUnionUF(4)
        root = uf.union(0, 1)

        assert root == uf.find(0) == uf.find(1)

    def test_union_same_component_is_noop(self):
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        root = uf.union(1, 0)

        assert root == uf.find(0)
        assert uf.count == 3

    def test_smaller_tree_goes_under_larger(self):
        """The larger component's root survives regardless of argument order."""
        uf = WeightedQuickUnionUF(5)
        uf.union(0, 1)
        uf.union(1, 2)
        big_root = uf.find(0)

        root = uf.union(big_root, 4)

        assert root == big_root
        assert uf.find(4) == big_root

    def test_chain_stays_connected_after_compression(self):
        n = 50
        uf = WeightedQuickUnionUF(n)
        for i in range(n - 1):
            uf.union(i, i + 1)

        root = uf.find(0)
        assert all(uf.find(i) == root for i in range(n))
        assert uf.count == 1
        assert uf.component_size(n - 1) == n

    def test_tie_goes_under_second_root(self):
        """Equal-size components are linked under q's root."""
        uf = WeightedQuickUnionUF(4)

        root = uf.union(0, 1)

        assert root == 1
        assert uf.find(0) == uf.find(1) == 1
