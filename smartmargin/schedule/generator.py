"""
Schedule generation from dates or from market conventions.
"""

import logging
from datetime import date, datetime
from typing import List, Union

from dateutil.relativedelta import relativedelta

from smartmargin.conventions.calendars import Calendar, get_calendar
from smartmargin.conventions.daycount import DayCountConvention, get_day_count_convention
from smartmargin.conventions.tenor import add_tenor
from smartmargin.conventions.types import BusinessDayAdjustment, Frequency, StubType

from .adjustments import adjust_date, apply_spot_lag
from .core import Schedule, SchedulePeriod

logger = logging.getLogger(__name__)


class ScheduleGenerator:
    """
    Generates adjusted accrual periods with a single short stub.

    With ``end_of_month`` set, rolls anchored on the last day of a month land
    on month ends (31 Aug, 30 Nov, 28 Feb, ...).
    """

    def __init__(
        self,
        calendar: Calendar,
        business_day_adjustment: BusinessDayAdjustment,
        day_count: DayCountConvention,
        end_of_month: bool = False,
    ):
        self.calendar = calendar
        self.business_day_adjustment = business_day_adjustment
        self.day_count = day_count
        self.end_of_month = end_of_month

    def _adjust_date(self, dt: date) -> date:
        return adjust_date(dt, self.business_day_adjustment, self.calendar)

    def _roll(self, anchor: date, months: int) -> date:
        rolled = anchor + relativedelta(months=months)
        if self.end_of_month and _is_month_end(anchor):
            return rolled + relativedelta(day=31)
        return rolled

    def generate_periods(
        self,
        effective_date: Union[date, datetime],
        maturity_date: Union[date, datetime],
        frequency: Frequency,
        stub_type: StubType = StubType.SHORT_FINAL,
        fixing_offset_days: int = 0,
        payment_offset_days: int = 0,
    ) -> List[SchedulePeriod]:
        """
        Generate the periods between two unadjusted dates.

        Args:
            effective_date: Start of the first period (unadjusted)
            maturity_date: End of the last period (unadjusted)
            frequency: Period length
            stub_type: Whether a short period sits at the start or the end
            fixing_offset_days: Business days from period start back to fixing
            payment_offset_days: Business days from period end to payment

        Returns:
            List of schedule periods
        """
        if isinstance(effective_date, datetime):
            effective_date = effective_date.date()
        if isinstance(maturity_date, datetime):
            maturity_date = maturity_date.date()

        if self._adjust_date(effective_date) >= self._adjust_date(maturity_date):
            raise ValueError(
                f"Effective date {effective_date} must be before maturity date {maturity_date}"
            )

        unadjusted = self._unadjusted_dates(
            effective_date, maturity_date, frequency, stub_type
        )

        periods = []
        for start_unadj, end_unadj in zip(unadjusted[:-1], unadjusted[1:]):
            start_adj = self._adjust_date(start_unadj)
            end_adj = self._adjust_date(end_unadj)
            periods.append(
                SchedulePeriod(
                    start_date=start_adj,
                    end_date=end_adj,
                    fixing_date=self.calendar.add_business_days(
                        start_adj, -fixing_offset_days
                    ),
                    payment_date=self.calendar.add_business_days(
                        end_adj, payment_offset_days
                    ),
                    year_fraction=self.day_count.year_fraction(start_adj, end_adj),
                    is_stub=self._is_stub(start_unadj, end_unadj, frequency),
                )
            )
        return periods

    def _unadjusted_dates(
        self,
        effective_date: date,
        maturity_date: date,
        frequency: Frequency,
        stub_type: StubType,
    ) -> List[date]:
        if frequency == Frequency.TERM:
            return [effective_date, maturity_date]

        step = frequency.months()
        if stub_type == StubType.SHORT_FINAL:
            # Roll forward from the effective date; the remainder is a final stub
            dates = [effective_date]
            k = 1
            while True:
                next_date = self._roll(effective_date, k * step)
                if next_date >= maturity_date:
                    dates.append(maturity_date)
                    return dates
                dates.append(next_date)
                k += 1

        if stub_type == StubType.SHORT_INITIAL:
            # Roll backward from maturity; the remainder is an initial stub
            dates = [maturity_date]
            k = 1
            while True:
                prev_date = self._roll(maturity_date, -k * step)
                if prev_date <= effective_date:
                    dates.insert(0, effective_date)
                    return dates
                dates.insert(0, prev_date)
                k += 1

        raise ValueError(f"Unsupported stub type: {stub_type}")

    def _is_stub(self, start: date, end: date, frequency: Frequency) -> bool:
        if frequency == Frequency.TERM:
            return False
        return self._roll(start, frequency.months()) != end and (
            self._roll(end, -frequency.months()) != start
        )


def _is_month_end(dt: date) -> bool:
    return dt + relativedelta(day=31) == dt


def _as_frequency(frequency: Union[str, Frequency]) -> Frequency:
    return frequency if isinstance(frequency, Frequency) else Frequency.from_label(frequency)


def create_schedule(
    reference_date: Union[date, datetime],
    effective_date: date,
    maturity_date: date,
    frequency: Union[str, Frequency],
    day_count: Union[str, DayCountConvention],
    business_day_adjustment: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING,
    calendar: Union[str, Calendar] = "TARGET",
    stub_type: StubType = StubType.SHORT_FINAL,
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
    end_of_month: bool = False,
) -> Schedule:
    """Build a schedule between explicit (unadjusted) start and end dates."""
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()
    dcc = get_day_count_convention(day_count)
    generator = ScheduleGenerator(
        get_calendar(calendar), business_day_adjustment, dcc, end_of_month
    )
    periods = generator.generate_periods(
        effective_date,
        maturity_date,
        _as_frequency(frequency),
        stub_type,
        fixing_offset_days,
        payment_offset_days,
    )
    return Schedule(reference_date=reference_date, periods=periods, day_count=dcc)


def create_schedule_from_conventions(
    reference_date: Union[date, datetime],
    spot_offset_days: int,
    start_offset: str,
    maturity: str,
    frequency: Union[str, Frequency],
    day_count: Union[str, DayCountConvention],
    stub_type: StubType,
    business_day_adjustment: BusinessDayAdjustment,
    calendar: Union[str, Calendar],
    fixing_offset_days: int = 0,
    payment_offset_days: int = 0,
    end_of_month: bool = False,
) -> Schedule:
    """
    Build a schedule for an instrument quoted on ``reference_date``.

    The instrument starts ``start_offset`` after spot and runs for the
    ``maturity`` tenor; e.g. ``(ref, 2, "0D", "10Y", "1Y", ...)`` is a spot
    starting ten year swap with annual periods.
    """
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()
    cal = get_calendar(calendar)
    spot = apply_spot_lag(reference_date, spot_offset_days, cal)
    start = add_tenor(spot, start_offset)
    end = add_tenor(start, maturity)
    logger.debug(
        "Schedule %s+%s from %s: start %s, end %s", start_offset, maturity, reference_date, start, end
    )
    return create_schedule(
        reference_date,
        start,
        end,
        frequency,
        day_count,
        business_day_adjustment,
        cal,
        stub_type,
        fixing_offset_days,
        payment_offset_days,
        end_of_month,
    )
