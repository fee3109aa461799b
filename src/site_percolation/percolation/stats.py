"""
Monte Carlo estimate of the site percolation threshold.

Each trial opens sites uniformly at random on a fresh grid until it
percolates; the fraction of open sites at that moment is the trial's
threshold estimate.
"""

from typing import Dict, Optional

import numpy as np
from scipy import stats

from .grid_percolation import InvalidArgument, Percolation, is_integer


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Run one percolation trial.

    Row and column are each drawn uniformly from [1, n] until the grid
    percolates. Draws that land on an already open site change nothing.

    Args:
        n: Grid size
        rng: Random generator owned by the caller

    Returns:
        Fraction of sites open when the grid first percolates
    """
    perc = Percolation(n)
    while not perc.percolates():
        row, col = rng.integers(1, n + 1, size=2)
        perc.open(int(row), int(col))
    return perc.number_of_open_sites() / (n * n)


class PercolationStats:
    """
    Percolation threshold statistics over independent trials.

    All trials run at construction time.

    Example:
        ps = PercolationStats(200, 100, seed=0)
        print(ps.mean(), ps.stddev())
        print(ps.confidence_lo(), ps.confidence_hi())
    """

    def __init__(self, n: int, trials: int, seed: Optional[int] = None,
                 confidence: float = 0.95):
        """
        Args:
            n: Grid size
            trials: Number of independent trials
            seed: Seed or SeedSequence for numpy's default_rng (None for fresh entropy)
            confidence: Confidence level for the interval, in (0, 1)
        """
        if not is_integer(n) or n <= 0:
            raise InvalidArgument(f"n: {n}")
        if not is_integer(trials) or trials <= 0:
            raise InvalidArgument(f"trials: {trials}")
        if not 0.0 < confidence < 1.0:
            raise InvalidArgument(f"confidence: {confidence}")

        self.n = n
        self.trials = trials
        self.seed = seed
        self.confidence = confidence
        self._z = float(stats.norm.ppf(0.5 + confidence / 2.0))

        rng = np.random.default_rng(seed)
        self._thresholds = np.array([run_trial(n, rng) for _ in range(trials)],
                                    dtype=np.float64)
        self._mean = None
        self._stddev = None

    @property
    def thresholds(self) -> np.ndarray:
        return self._thresholds.copy()

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        if self._mean is None:
            self._mean = float(np.mean(self._thresholds))
        return self._mean

    def stddev(self) -> float:
        """Sample standard deviation of the threshold (NaN for a single trial)."""
        if self.trials == 1:
            return float('nan')
        if self._stddev is None:
            self._stddev = float(np.std(self._thresholds, ddof=1))
        return self._stddev

    def _half_width(self) -> float:
        return self._z * self.stddev() / np.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, float]:
        return {
            'grid_size': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }
