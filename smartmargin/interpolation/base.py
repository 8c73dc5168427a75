"""
Base class for discount factor interpolation.
"""
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class Interpolator(ABC):
    """Interpolates values given on increasing pillar times."""

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            pillars: Pillar times (in years)
            values: Values at the pillars (discount factors)
        """
        if len(pillars) != len(values):
            raise ValueError("Pillars and values must have same length")
        if len(pillars) < 2:
            raise ValueError("Need at least 2 points for interpolation")

        order = np.argsort(pillars, kind="stable")
        self.pillars = np.asarray(pillars, dtype=float)[order]
        self.values = np.asarray(values, dtype=float)[order]

        if np.any(np.diff(self.pillars) <= 0.0):
            raise ValueError("Duplicate pillar times not allowed")

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """Interpolate value at time t."""

    def _segment(self, t: float) -> int:
        """Index i with pillars[i] <= t < pillars[i+1], clamped to the grid."""
        i = int(np.searchsorted(self.pillars, t, side="right")) - 1
        return min(max(i, 0), len(self.pillars) - 2)
