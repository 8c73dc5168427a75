"""Data structures for swap valuation.

This module defines the curve container handed to products and the
cashflow breakdowns produced when a leg or swap is priced.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterator, List, Optional

from smartmargin.curves.discount import DiscountCurve
from smartmargin.errors import CalibrationFailure


@dataclass
class CurveSet:
    """Named curves calibrated to one market state.

    Attributes:
        reference_date: Date of the market state all curves refer to
        curves: Curve name to discount curve
    """

    reference_date: date
    curves: Dict[str, DiscountCurve] = field(default_factory=dict)

    def add(self, curve: DiscountCurve) -> None:
        self.curves[curve.name] = curve

    def get_curve(self, name: str) -> DiscountCurve:
        """Return the curve called ``name``.

        Raises:
            CalibrationFailure: If no such curve was calibrated
        """
        try:
            return self.curves[name]
        except KeyError:
            raise CalibrationFailure(
                f"Curve {name!r} not available for {self.reference_date}. "
                f"Calibrated curves: {sorted(self.curves)}"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self.curves

    def __iter__(self) -> Iterator[str]:
        return iter(self.curves)

    def __len__(self) -> int:
        return len(self.curves)


@dataclass
class CouponCashflow:
    """A single coupon of a swap leg, per unit notional.

    Attributes:
        idx: Period index (0-based)
        accrual_start: Accrual start date (adjusted)
        accrual_end: Accrual end date (adjusted)
        payment_date: Payment date
        accrual_fraction: Day count fraction for the period
        forward_rate: Projected rate for floating legs (None for fixed)
        spread: Fixed rate or spread over the forward rate
        discount_factor: Discount factor from evaluation date to payment date
        pv: Present value at the evaluation date
    """

    idx: int
    accrual_start: date
    accrual_end: date
    payment_date: date
    accrual_fraction: float
    forward_rate: Optional[float]
    spread: float
    discount_factor: float
    pv: float


@dataclass
class LegPV:
    """Present value and details for one leg, per unit notional."""

    pv: float
    cashflows: List[CouponCashflow]


@dataclass
class SwapPV:
    """Present value breakdown of a swap, receiver minus payer.

    Attributes:
        pv_total: Receiver leg PV minus payer leg PV
        receiver_leg_pv: Receiver leg details
        payer_leg_pv: Payer leg details
    """

    pv_total: float
    receiver_leg_pv: LegPV
    payer_leg_pv: LegPV
