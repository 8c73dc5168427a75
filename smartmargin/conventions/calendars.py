"""
QuantLib-backed business day calendars.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from .daycount import to_ql_date


def _to_py_date(ql_date: ql.Date) -> date:
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Business day calendar backed by a QuantLib calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        return self._ql_calendar.isBusinessDay(to_ql_date(dt))

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Move ``days`` business days forward (or backward if negative).

        With ``days == 0`` a holiday is rolled forward to the next business day.
        """
        ql_result = self._ql_calendar.advance(to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


TARGET = Calendar("TARGET", ql.TARGET())
WEEKEND_ONLY = Calendar("WEEKEND", ql.WeekendsOnly())

# EUTA is the FpML business center code for TARGET.
CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "EUTA": TARGET,
    "WEEKEND": WEEKEND_ONLY,
}


def get_calendar(name: Union[str, Calendar]) -> Calendar:
    """Get a calendar by name ("TARGET", "EUTA", "EUR" or "WEEKEND")."""
    if isinstance(name, Calendar):
        return name
    key = name.upper().strip()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
