"""Tests for threshold sweeps."""

import pandas as pd

from site_percolation.percolation.analysis import (
    SUMMARY_COLUMNS, print_sweep_summary, run_sweep, run_sweep_from_config,
)
from site_percolation.run.manifest import RunConfig


class TestRunSweep:
    """Tests for run_sweep."""

    def test_one_row_per_grid_size(self):
        df = run_sweep([1, 2, 4], trials=3, seed=0)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == SUMMARY_COLUMNS
        assert df['grid_size'].tolist() == [1, 2, 4]
        assert (df['trials'] == 3).all()
        assert df.loc[0, 'mean'] == 1.0
        assert (df['total_time_seconds'] >= 0).all()

    def test_seeded_sweep_is_reproducible(self):
        a = run_sweep([3, 5], trials=4, seed=11)
        b = run_sweep([3, 5], trials=4, seed=11)
        stat_cols = ['grid_size', 'trials', 'mean', 'stddev', 'confidence_lo', 'confidence_hi']

        pd.testing.assert_frame_equal(a[stat_cols], b[stat_cols])

    def test_empty_sweep(self):
        df = run_sweep([], trials=2, seed=0)

        assert len(df) == 0
        assert list(df.columns) == SUMMARY_COLUMNS

    def test_from_config(self):
        config = RunConfig({
            'run_name': 'small',
            'experiment': {'grid_sizes': [2, 3], 'trials': 2, 'seed': 1},
        })

        df = run_sweep_from_config(config)

        assert df['grid_size'].tolist() == [2, 3]

    def test_print_summary(self, capsys):
        df = run_sweep([1, 2], trials=2, seed=0)

        print_sweep_summary(df)
        out = capsys.readouterr().out

        assert "THRESHOLD SWEEP" in out
        assert "n=    1" in out
        assert "95% CI" in out
