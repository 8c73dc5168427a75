"""
Base curve classes and protocols.
"""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Protocol, Union

from smartmargin.conventions.daycount import ACT_365F

CurveTime = Union[datetime, date, float]


class Curve(Protocol):
    """Protocol defining the interface for all curves."""

    name: str
    reference_date: date

    def df(self, t: CurveTime) -> float:
        """Get discount factor at time t."""
        ...


class BaseCurve(ABC):
    """Base implementation for discount curves.

    Dates are converted to times with ACT/365F from the reference date;
    floats are taken as times already.
    """

    def __init__(self, reference_date: Union[date, datetime], name: str = ""):
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        self.reference_date = reference_date
        self.name = name

    def _to_year_fraction(self, t: CurveTime) -> float:
        if isinstance(t, (int, float)):
            return float(t)
        return ACT_365F.year_fraction(self.reference_date, t)

    @abstractmethod
    def df(self, t: CurveTime) -> float:
        """Get discount factor at time t."""

    def zero(self, t: CurveTime) -> float:
        """Continuously compounded zero rate at time t."""
        time_frac = self._to_year_fraction(t)
        if time_frac <= 0:
            return 0.0

        df_val = self.df(time_frac)
        if df_val <= 0:
            raise ValueError(f"Non-positive discount factor: {df_val}")
        return -math.log(df_val) / time_frac

    def forward(self, start: CurveTime, end: CurveTime, year_fraction: float) -> float:
        """Simply compounded forward rate over [start, end] accruing ``year_fraction``."""
        if year_fraction <= 0:
            raise ValueError("Forward period must be positive")
        return (self.df(start) / self.df(end) - 1.0) / year_fraction

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name})"
            if self.name
            else self.__class__.__name__
        )
