"""
Run configuration for percolation threshold experiments.

A RunConfig loads a YAML run definition naming the grid sizes to sweep,
the number of trials per size, and the random seed.

Example YAML:
    run_name: threshold_sweep
    description: Threshold estimate vs grid size
    experiment:
      grid_sizes: [16, 32, 64]
      trials: 200
      seed: 42
      confidence: 0.95
"""

import numbers
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..percolation.grid_percolation import InvalidArgument, is_integer


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Grid sizes and trial counts are checked on load so that a bad config
    fails before any trial runs.

    Example:
        config = RunConfig.from_yaml('config/threshold_sweep.yaml')
        print(config.run_name)
        print(config.grid_sizes, config.trials)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required config sections and experiment values."""
        required_sections = ['run_name', 'experiment']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        experiment = self._data['experiment']
        if not isinstance(experiment, dict):
            raise ValueError("Config section 'experiment' must be a mapping")
        for key in ('grid_sizes', 'trials'):
            if key not in experiment:
                raise ValueError(f"Missing required experiment setting: '{key}'")

        sizes = experiment['grid_sizes']
        if not isinstance(sizes, list):
            sizes = [sizes]
        if not sizes:
            raise InvalidArgument("grid_sizes: empty")
        for n in sizes:
            if not is_integer(n) or n <= 0:
                raise InvalidArgument(f"grid_sizes: {n}")
        trials = experiment['trials']
        if not is_integer(trials) or trials <= 0:
            raise InvalidArgument(f"trials: {trials}")
        seed = experiment.get('seed')
        if seed is not None and not is_integer(seed):
            raise InvalidArgument(f"seed: {seed}")
        confidence = experiment.get('confidence', 0.95)
        if (isinstance(confidence, bool) or not isinstance(confidence, numbers.Real)
                or not 0.0 < confidence < 1.0):
            raise InvalidArgument(f"confidence: {confidence}")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def grid_sizes(self) -> List[int]:
        """Grid sizes to sweep (a single int is accepted as a one-item list)."""
        sizes = self._data['experiment']['grid_sizes']
        if not isinstance(sizes, list):
            sizes = [sizes]
        return [int(n) for n in sizes]

    @property
    def trials(self) -> int:
        return int(self._data['experiment']['trials'])

    @property
    def seed(self) -> Optional[int]:
        seed = self._data['experiment'].get('seed')
        return None if seed is None else int(seed)

    @property
    def confidence(self) -> float:
        return float(self._data['experiment'].get('confidence', 0.95))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'run_name': self.run_name,
            'description': self.description,
            'grid_sizes': self.grid_sizes,
            'trials': self.trials,
            'seed': self.seed,
            'confidence': self.confidence,
        }
