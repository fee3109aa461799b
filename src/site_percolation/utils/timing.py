"""
Timing helpers for reporting how long experiments take.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional


@contextmanager
def timed(timing: Dict[str, float], key: str = 'total_time') -> Iterator[Dict[str, float]]:
    """
    Record elapsed wall time of the block into timing[key] (seconds).

    Args:
        timing: Dict to write the duration into
        key: Key to store the duration under

    Example:
        timing = {}
        with timed(timing, 'run_time'):
            run()
        timing['run_time']
    """
    start_time = time.time()
    try:
        yield timing
    finally:
        timing[key] = time.time() - start_time


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return 'N/A'

    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = seconds / 60
        return f"{minutes:.1f}m"
    else:
        hours = seconds / 3600
        return f"{hours:.2f}h"
