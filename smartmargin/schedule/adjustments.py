"""
Business day adjustment and spot lag rules for schedule generation.
"""

from datetime import date, datetime, timedelta
from typing import Union

from smartmargin.conventions.calendars import Calendar
from smartmargin.conventions.types import BusinessDayAdjustment


def adjust_date(
    dt: Union[date, datetime], adjustment: BusinessDayAdjustment, calendar: Calendar
) -> date:
    """Apply business day adjustment to a date."""
    if isinstance(dt, datetime):
        dt = dt.date()

    if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
        return dt

    if adjustment in (
        BusinessDayAdjustment.FOLLOWING,
        BusinessDayAdjustment.MODIFIED_FOLLOWING,
    ):
        step = timedelta(days=1)
    elif adjustment in (
        BusinessDayAdjustment.PRECEDING,
        BusinessDayAdjustment.MODIFIED_PRECEDING,
    ):
        step = timedelta(days=-1)
    else:
        raise ValueError(f"Unknown business day adjustment: {adjustment}")

    adjusted = dt
    while not calendar.is_business_day(adjusted):
        adjusted += step

    modified = adjustment in (
        BusinessDayAdjustment.MODIFIED_FOLLOWING,
        BusinessDayAdjustment.MODIFIED_PRECEDING,
    )
    if modified and adjusted.month != dt.month:
        # Crossed a month boundary: roll the other way instead
        adjusted = dt
        while not calendar.is_business_day(adjusted):
            adjusted -= step

    return adjusted


def apply_spot_lag(
    trade_date: Union[date, datetime], spot_lag_days: int, calendar: Calendar
) -> date:
    """Spot (settlement) date ``spot_lag_days`` business days after the trade date."""
    if isinstance(trade_date, datetime):
        trade_date = trade_date.date()

    return calendar.add_business_days(trade_date, spot_lag_days)
