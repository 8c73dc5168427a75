"""
Discount curve on interpolated pillar discount factors.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import List, Sequence, Tuple, Union

from smartmargin.interpolation import create_interpolator

from .base import BaseCurve, CurveTime

logger = logging.getLogger(__name__)


class DiscountCurve(BaseCurve):
    """
    Discount curve built from pillar times and discount factors.

    The curve always contains the point (0, 1); discount factors for times
    at or before the reference date are 1.
    """

    def __init__(
        self,
        reference_date: Union[date, datetime],
        pillar_times: Sequence[float],
        discount_factors: Sequence[float],
        interpolation_method: str = "STEP_FORWARD",
        name: str = "",
    ):
        """
        Initialize discount curve.

        Args:
            reference_date: Curve reference date
            pillar_times: Pillar times in years (ACT/365F) from reference date
            discount_factors: Discount factors at pillar times
            interpolation_method: Interpolation method name
            name: Curve name
        """
        super().__init__(reference_date, name)

        if len(pillar_times) != len(discount_factors):
            raise ValueError("Pillar times and discount factors must have same length")
        if not pillar_times:
            raise ValueError("Need at least 1 pillar point")

        for i, df in enumerate(discount_factors):
            if df <= 0:
                raise ValueError(f"Discount factor at pillar {i} must be positive: {df}")

        pairs = sorted(zip(pillar_times, discount_factors))
        if pairs[0][0] > 0.0:
            pairs.insert(0, (0.0, 1.0))

        for i in range(1, len(pairs)):
            increase = pairs[i][1] - pairs[i - 1][1]
            if increase > 1e-6:
                logger.debug(
                    "Curve %s: discount factors increasing at pillar %s (increase = %.8f)",
                    name,
                    i,
                    increase,
                )

        self.pillar_times = [p[0] for p in pairs]
        self.discount_factors = [p[1] for p in pairs]
        self.interpolation_method = interpolation_method
        self.interpolator = create_interpolator(
            interpolation_method, self.pillar_times, self.discount_factors
        )

    def df(self, t: CurveTime) -> float:
        time_frac = self._to_year_fraction(t)
        if time_frac <= 0:
            return 1.0
        return self.interpolator.interpolate(time_frac)

    def get_pillar_info(self) -> List[Tuple[float, float, float]]:
        """Pillars as (time, discount factor, zero rate) tuples."""
        info = []
        for t, df in zip(self.pillar_times, self.discount_factors):
            zero_rate = -math.log(df) / t if t > 0 else 0.0
            info.append((t, df, zero_rate))
        return info

    @classmethod
    def from_flat_rate(
        cls,
        reference_date: Union[date, datetime],
        rate: float,
        name: str = "",
        max_time: float = 60.0,
    ) -> "DiscountCurve":
        """Curve with a constant continuously compounded zero rate."""
        return cls(
            reference_date=reference_date,
            pillar_times=[max_time],
            discount_factors=[math.exp(-rate * max_time)],
            interpolation_method="STEP_FORWARD",
            name=name,
        )

    def __repr__(self) -> str:
        return (
            f"DiscountCurve(name={self.name!r}, reference_date={self.reference_date}, "
            f"pillars={len(self.pillar_times)}, interpolation={self.interpolation_method!r})"
        )
