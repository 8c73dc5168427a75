"""
Core data structures for schedule generation.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator, List

from smartmargin.conventions.daycount import ACT_365F, DayCountConvention


@dataclass(frozen=True)
class SchedulePeriod:
    """A single accrual period of a payment schedule (all dates adjusted)."""

    start_date: date
    end_date: date
    fixing_date: date
    payment_date: date
    year_fraction: float
    is_stub: bool = False


@dataclass(frozen=True)
class Schedule:
    """Ordered accrual periods anchored at a reference date.

    Times are ACT/365F year fractions from ``reference_date``.
    """

    reference_date: date
    periods: List[SchedulePeriod]
    day_count: DayCountConvention

    def time(self, dt: date) -> float:
        return ACT_365F.year_fraction(self.reference_date, dt)

    def payment_time(self, index: int) -> float:
        return self.time(self.periods[index].payment_date)

    @property
    def final_payment_time(self) -> float:
        return self.payment_time(len(self.periods) - 1)

    @property
    def start_date(self) -> date:
        return self.periods[0].start_date

    @property
    def maturity_date(self) -> date:
        return self.periods[-1].end_date

    def __len__(self) -> int:
        return len(self.periods)

    def __iter__(self) -> Iterator[SchedulePeriod]:
        return iter(self.periods)

    def __getitem__(self, index: int) -> SchedulePeriod:
        return self.periods[index]
