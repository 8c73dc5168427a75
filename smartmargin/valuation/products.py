"""Analytic swap products.

Legs are valued per unit notional. A leg's value at an evaluation date is
the sum over periods paying strictly after that date of

    (forward + spread) * year_fraction * DF(payment) / DF(evaluation)

where the forward is the simple forward of the leg's forward curve over the
accrual period (zero for a fixed leg, whose rate is its spread).
"""

from datetime import date, datetime
from typing import Optional, Union

from smartmargin.schedule import Schedule

from .discounting import get_discount_factor
from .types import CouponCashflow, CurveSet, LegPV, SwapPV


def _as_date(dt: Union[date, datetime]) -> date:
    return dt.date() if isinstance(dt, datetime) else dt


class SwapLeg:
    """A fixed or floating swap leg on a generated schedule."""

    def __init__(
        self,
        schedule: Schedule,
        forward_curve_name: Optional[str],
        spread: float,
        discount_curve_name: str,
    ):
        self.schedule = schedule
        self.forward_curve_name = forward_curve_name or None
        self.spread = spread
        self.discount_curve_name = discount_curve_name

    def price(self, evaluation_date: Union[date, datetime], curves: CurveSet) -> LegPV:
        """Price the leg with full cashflow details.

        Args:
            evaluation_date: Date the value is expressed at
            curves: Curve set holding the leg's forward and discount curves

        Returns:
            LegPV with per-coupon breakdown

        Raises:
            CalibrationFailure: If a referenced curve is not in ``curves``
        """
        evaluation_date = _as_date(evaluation_date)
        discount_curve = curves.get_curve(self.discount_curve_name)
        forward_curve = (
            curves.get_curve(self.forward_curve_name) if self.forward_curve_name else None
        )

        cashflows = []
        for idx, period in enumerate(self.schedule):
            if period.payment_date <= evaluation_date:
                continue

            forward_rate = None
            if forward_curve is not None:
                forward_rate = forward_curve.forward(
                    period.start_date, period.end_date, period.year_fraction
                )

            discount_factor = get_discount_factor(
                period.payment_date, discount_curve, evaluation_date
            )
            rate = (forward_rate or 0.0) + self.spread
            cashflows.append(
                CouponCashflow(
                    idx=idx,
                    accrual_start=period.start_date,
                    accrual_end=period.end_date,
                    payment_date=period.payment_date,
                    accrual_fraction=period.year_fraction,
                    forward_rate=forward_rate,
                    spread=self.spread,
                    discount_factor=discount_factor,
                    pv=rate * period.year_fraction * discount_factor,
                )
            )

        return LegPV(pv=sum(cf.pv for cf in cashflows), cashflows=cashflows)

    def value(self, evaluation_date: Union[date, datetime], curves: CurveSet) -> float:
        return self.price(evaluation_date, curves).pv

    def __repr__(self) -> str:
        return (
            f"SwapLeg(periods={len(self.schedule)}, forward={self.forward_curve_name!r}, "
            f"spread={self.spread}, discount={self.discount_curve_name!r})"
        )


class Swap:
    """Receiver leg minus payer leg."""

    def __init__(self, leg_receiver: SwapLeg, leg_payer: SwapLeg):
        self.leg_receiver = leg_receiver
        self.leg_payer = leg_payer

    def price(self, evaluation_date: Union[date, datetime], curves: CurveSet) -> SwapPV:
        receiver = self.leg_receiver.price(evaluation_date, curves)
        payer = self.leg_payer.price(evaluation_date, curves)
        return SwapPV(
            pv_total=receiver.pv - payer.pv,
            receiver_leg_pv=receiver,
            payer_leg_pv=payer,
        )

    def value(self, evaluation_date: Union[date, datetime], curves: CurveSet) -> float:
        """Value per unit notional at ``evaluation_date``."""
        return self.price(evaluation_date, curves).pv_total
