"""Grid percolation and threshold estimation."""

from .union_find import WeightedQuickUnionUF
from .grid_percolation import InvalidArgument, Percolation
from .stats import PercolationStats, run_trial
from .analysis import run_sweep, run_sweep_from_config

__all__ = ['WeightedQuickUnionUF', 'InvalidArgument', 'Percolation', 'PercolationStats',
           'run_trial', 'run_sweep', 'run_sweep_from_config']
