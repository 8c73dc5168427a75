"""
Step forward (piecewise flat forward) interpolation.
"""
from typing import Sequence

import numpy as np

from .base import Interpolator


class StepForwardInterpolator(Interpolator):
    """Piecewise constant continuously compounded forward rates.

    Log discount factors are linear between pillars; beyond the last pillar
    the last forward rate is extended.
    """

    def __init__(self, pillars: Sequence[float], discount_factors: Sequence[float]):
        super().__init__(pillars, discount_factors)
        if np.any(self.values <= 0.0):
            raise ValueError("Discount factors must be positive")
        self.log_values = np.log(self.values)
        self.forward_rates = -np.diff(self.log_values) / np.diff(self.pillars)

    def interpolate(self, t: float) -> float:
        i = self._segment(t)
        if t < self.pillars[0]:
            # Extend the first segment backwards
            i = 0
        return float(np.exp(self.log_values[i] - self.forward_rates[i] * (t - self.pillars[i])))
