"""
Percolation threshold sweeps.

Runs PercolationStats across several grid sizes and collects one summary
row per size into a DataFrame.
"""

from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .stats import PercolationStats
from ..utils.timing import timed, format_duration


SUMMARY_COLUMNS = [
    'grid_size', 'trials', 'mean', 'stddev',
    'confidence_lo', 'confidence_hi', 'total_time_seconds',
]


def run_sweep(
    grid_sizes: Sequence[int],
    trials: int,
    seed: Optional[int] = None,
    confidence: float = 0.95,
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Estimate the percolation threshold for each grid size.

    Args:
        grid_sizes: Grid sizes to evaluate, in order
        trials: Number of trials per grid size
        seed: Base seed; each grid size gets its own child seed
        confidence: Confidence level for the interval
        verbose: Print progress per grid size

    Returns:
        DataFrame with one row per grid size (see SUMMARY_COLUMNS)
    """
    grid_sizes = list(grid_sizes)
    if seed is not None:
        child_seeds = np.random.SeedSequence(seed).spawn(len(grid_sizes))
    else:
        child_seeds = [None] * len(grid_sizes)

    rows: List[dict] = []
    for n, child_seed in zip(grid_sizes, child_seeds):
        timing = {}
        with timed(timing, 'total_time_seconds'):
            ps = PercolationStats(n, trials, seed=child_seed, confidence=confidence)
            row = ps.summary()
        row['total_time_seconds'] = timing['total_time_seconds']
        rows.append(row)

        if verbose:
            print(f"  n={n}: mean={row['mean']:.6f} "
                  f"({format_duration(row['total_time_seconds'])})")

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def run_sweep_from_config(config, verbose: bool = False) -> pd.DataFrame:
    """
    Run the sweep described by a RunConfig.

    Args:
        config: RunConfig object
        verbose: Print progress per grid size

    Returns:
        Sweep DataFrame
    """
    return run_sweep(
        config.grid_sizes,
        config.trials,
        seed=config.seed,
        confidence=config.confidence,
        verbose=verbose,
    )


def print_sweep_summary(df: pd.DataFrame, confidence: float = 0.95) -> None:
    """Print a sweep DataFrame as a readable report."""
    print(f"\n=== THRESHOLD SWEEP ===")
    print(f"Grid sizes: {len(df)}")
    if len(df) == 0:
        return

    print(f"Trials per size: {int(df['trials'].iloc[0])}")
    print()
    level = f"{confidence * 100:g}%"
    for _, row in df.iterrows():
        print(f"n={int(row['grid_size']):>5}  mean={row['mean']:.6f}  "
              f"stddev={row['stddev']:.6f}  "
              f"{level} CI=[{row['confidence_lo']:.6f}, {row['confidence_hi']:.6f}]  "
              f"time={format_duration(row['total_time_seconds'])}")

    total = df['total_time_seconds'].sum()
    print(f"\nTotal time: {format_duration(total)}")
