"""
Linear interpolation on discount factors.
"""
from .base import Interpolator


class LinearDiscountFactorInterpolator(Interpolator):
    """Linear interpolation on discount factors, flat outside the pillars."""

    def interpolate(self, t: float) -> float:
        if t <= self.pillars[0]:
            return float(self.values[0])
        if t >= self.pillars[-1]:
            return float(self.values[-1])

        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        df1, df2 = self.values[i], self.values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return float(df1 + weight * (df2 - df1))
