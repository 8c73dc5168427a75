"""
Tenor labels ("2W", "6M", "10Y") and their calendar arithmetic.
"""

from datetime import date, datetime
from typing import Tuple, Union

from dateutil.relativedelta import relativedelta


def parse_tenor(tenor: str) -> Tuple[int, str]:
    """Split a tenor label such as "10Y" into (10, "Y")."""
    t = tenor.upper().strip()
    if len(t) < 2 or t[-1] not in "DWMY" or not t[:-1].isdigit():
        raise ValueError(f"Unsupported tenor: {tenor}")
    return int(t[:-1]), t[-1]


def tenor_to_relativedelta(tenor: str) -> relativedelta:
    count, unit = parse_tenor(tenor)
    if unit == "D":
        return relativedelta(days=count)
    if unit == "W":
        return relativedelta(weeks=count)
    if unit == "M":
        return relativedelta(months=count)
    return relativedelta(years=count)


def tenor_to_months(tenor: str) -> int:
    """Convert tenor string (e.g., '3M', '2Y') to number of months."""
    count, unit = parse_tenor(tenor)
    if unit == "M":
        return count
    if unit == "Y":
        return count * 12
    raise ValueError(f"Tenor {tenor} is not a whole number of months")


def add_tenor(start_date: Union[date, datetime], tenor: str) -> date:
    """Unadjusted date ``tenor`` after ``start_date`` (month ends are clipped)."""
    if isinstance(start_date, datetime):
        start_date = start_date.date()
    return start_date + tenor_to_relativedelta(tenor)
