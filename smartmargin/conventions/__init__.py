"""
Market conventions: day counts, calendars and schedule enums.
"""

from .calendars import TARGET, Calendar, get_calendar
from .daycount import ACT_360, ACT_365F, DayCountConvention, get_day_count_convention
from .types import BusinessDayAdjustment, Frequency, LegType, StubType

__all__ = [
    "Calendar",
    "TARGET",
    "get_calendar",
    "DayCountConvention",
    "ACT_360",
    "ACT_365F",
    "get_day_count_convention",
    "BusinessDayAdjustment",
    "Frequency",
    "LegType",
    "StubType",
]
