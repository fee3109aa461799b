"""
Site Percolation - Monte Carlo estimation of the percolation threshold.

This package provides tools for:
- Tracking open-site connectivity on an n-by-n grid (union-find based)
- Estimating the percolation threshold over independent random trials
- Sweeping grid sizes from a YAML run configuration
"""

__version__ = "1.0.0"
