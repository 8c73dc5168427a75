"""Calibration specifications.

A calibration spec describes one instrument whose value must be zero on the
calibrated curves, and the curve point (name, time) that is solved for.
Providers turn a market quote into a spec for a given reference date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Protocol, Union

from smartmargin.conventions.types import BusinessDayAdjustment, StubType
from smartmargin.schedule import Schedule, create_schedule_from_conventions


@dataclass(frozen=True)
class CalibrationContext:
    """Market state a spec is built for."""

    reference_date: date

    @classmethod
    def at(cls, reference_date: Union[date, datetime]) -> "CalibrationContext":
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        return cls(reference_date)


@dataclass(frozen=True)
class CalibrationSpec:
    """One calibration instrument: receiver leg minus payer leg valued at zero.

    Attributes:
        label: Instrument identifier, e.g. "EUR-OIS-10Y"
        product_type: Instrument type ("Swap")
        receiver_schedule: Receiver leg schedule
        receiver_forward_curve: Receiver leg projection curve
        receiver_spread: Receiver leg spread
        receiver_discount_curve: Receiver leg discount curve
        payer_schedule: Payer leg schedule
        payer_forward_curve: Payer leg projection curve (None: fixed leg)
        payer_spread: Payer leg spread, the quoted rate of a fixed leg
        payer_discount_curve: Payer leg discount curve
        calibration_curve: Curve the solved point belongs to
        calibration_time: Curve time of the solved point
    """

    label: str
    product_type: str
    receiver_schedule: Schedule
    receiver_forward_curve: Optional[str]
    receiver_spread: float
    receiver_discount_curve: str
    payer_schedule: Schedule
    payer_forward_curve: Optional[str]
    payer_spread: float
    payer_discount_curve: str
    calibration_curve: str
    calibration_time: float


class CalibrationSpecProvider(Protocol):
    """Anything that yields a calibration spec for a market state."""

    def get_calibration_spec(self, context: CalibrationContext) -> CalibrationSpec:
        ...


class CalibrationSpecProviderOis:
    """Spot starting overnight index swap quoted by tenor and fixed rate.

    Both legs share one schedule (ACT/360, modified following, TARGET, two
    business days spot lag, one business day payment delay). The receiver
    leg floats on ``curve_name`` and the payer leg pays ``swap_rate``. The
    solved point is the final payment time of the receiver leg.
    """

    def __init__(
        self,
        maturity_label: str,
        frequency: str,
        swap_rate: float,
        curve_name: str = "discount-EUR-OIS",
        currency: str = "EUR",
        spot_lag: int = 2,
        calendar: str = "TARGET",
    ):
        self.maturity_label = maturity_label
        self.frequency = frequency
        self.swap_rate = swap_rate
        self.curve_name = curve_name
        self.currency = currency
        self.spot_lag = spot_lag
        self.calendar = calendar

    def _schedule(self, reference_date: date) -> Schedule:
        return create_schedule_from_conventions(
            reference_date,
            spot_offset_days=self.spot_lag,
            start_offset="0D",
            maturity=self.maturity_label,
            frequency=self.frequency,
            day_count="ACT/360",
            stub_type=StubType.SHORT_INITIAL,
            business_day_adjustment=BusinessDayAdjustment.MODIFIED_FOLLOWING,
            calendar=self.calendar,
            fixing_offset_days=0,
            payment_offset_days=1,
        )

    def get_calibration_spec(self, context: CalibrationContext) -> CalibrationSpec:
        receiver_schedule = self._schedule(context.reference_date)
        payer_schedule = self._schedule(context.reference_date)

        return CalibrationSpec(
            label=f"{self.currency}-OIS-{self.maturity_label}",
            product_type="Swap",
            receiver_schedule=receiver_schedule,
            receiver_forward_curve=self.curve_name,
            receiver_spread=0.0,
            receiver_discount_curve=self.curve_name,
            payer_schedule=payer_schedule,
            payer_forward_curve=None,
            payer_spread=self.swap_rate,
            payer_discount_curve=self.curve_name,
            calibration_curve=self.curve_name,
            calibration_time=receiver_schedule.final_payment_time,
        )

    def __repr__(self) -> str:
        return (
            f"CalibrationSpecProviderOis({self.maturity_label!r}, {self.frequency!r}, "
            f"{self.swap_rate!r}, curve_name={self.curve_name!r})"
        )
