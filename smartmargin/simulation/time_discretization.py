"""
Time grids for Monte Carlo simulation.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

# Grid lookups treat times this close to a grid point as equal to it
_TIME_TOLERANCE = 1e-10


class TimeDiscretization:
    """Strictly increasing simulation times."""

    def __init__(self, times: Sequence[float]):
        times = np.asarray(times, dtype=float)
        if times.ndim != 1 or len(times) < 2:
            raise ValueError("Need at least two grid times")
        if np.any(np.diff(times) <= 0.0):
            raise ValueError("Grid times must be strictly increasing")
        self.times = times

    @classmethod
    def from_step(
        cls, initial: float, last: float, step: float
    ) -> "TimeDiscretization":
        """Grid from ``initial`` to ``last`` in steps of ``step``.

        If the range is not a multiple of the step, the final period is short.
        """
        if step <= 0.0 or last <= initial:
            raise ValueError("Need step > 0 and last > initial")
        n_steps = int(math.floor((last - initial) / step + _TIME_TOLERANCE))
        times = initial + step * np.arange(n_steps + 1)
        if last - times[-1] > _TIME_TOLERANCE:
            times = np.append(times, last)
        else:
            times[-1] = last
        return cls(times)

    @property
    def number_of_time_steps(self) -> int:
        return len(self.times) - 1

    @property
    def first_time(self) -> float:
        return float(self.times[0])

    @property
    def last_time(self) -> float:
        return float(self.times[-1])

    def time(self, index: int) -> float:
        return float(self.times[index])

    def time_steps(self) -> np.ndarray:
        return np.diff(self.times)

    def time_index_nearest_less_or_equal(self, t: float) -> int:
        """Index of the largest grid time <= t, or -1 if t precedes the grid."""
        return int(np.searchsorted(self.times, t + _TIME_TOLERANCE, side="right")) - 1

    def __len__(self) -> int:
        return len(self.times)
