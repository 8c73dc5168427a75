"""Product and trade descriptors.

Descriptors are plain data parsed from a trade document. They carry no
market data and are turned into priceable products by
:class:`~smartmargin.valuation.factory.AnalyticProductFactory`.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional

from smartmargin.conventions.types import BusinessDayAdjustment, LegType, StubType
from smartmargin.schedule import Schedule, create_schedule


@dataclass(frozen=True)
class ScheduleDescriptor:
    """Unadjusted dates and conventions of a leg's accrual schedule."""

    start_date: date
    maturity_date: date
    frequency: str
    day_count: str
    business_day_adjustment: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING
    calendar: str = "TARGET"
    stub_type: StubType = StubType.SHORT_FINAL
    fixing_offset_days: int = 0
    payment_offset_days: int = 0

    def get_schedule(self, reference_date: date) -> Schedule:
        return create_schedule(
            reference_date,
            self.start_date,
            self.maturity_date,
            self.frequency,
            self.day_count,
            self.business_day_adjustment,
            self.calendar,
            self.stub_type,
            self.fixing_offset_days,
            self.payment_offset_days,
        )


@dataclass(frozen=True)
class InterestRateSwapLegProductDescriptor:
    """One leg of an interest rate swap.

    Attributes:
        schedule: Accrual schedule description
        forward_curve_name: Projection curve; None for a fixed leg
        discount_curve_name: Curve discounting the leg's payments
        spread: Fixed rate of a fixed leg, or spread over the floating rate
        notional: Leg notional
    """

    schedule: ScheduleDescriptor
    forward_curve_name: Optional[str]
    discount_curve_name: str
    spread: float
    notional: float = 1.0

    @property
    def leg_type(self) -> LegType:
        return LegType.FLOATING if self.forward_curve_name else LegType.FIXED


@dataclass(frozen=True)
class InterestRateSwapProductDescriptor:
    """A swap seen from the contract owner: it receives one leg and pays the other."""

    leg_receiver: InterestRateSwapLegProductDescriptor
    leg_payer: InterestRateSwapLegProductDescriptor

    @property
    def notional(self) -> float:
        return self.leg_receiver.notional


@dataclass(frozen=True)
class TradeDescriptor:
    """Trade-level data of a parsed contract.

    Attributes:
        trade_date: Date the trade was agreed
        start_date: Earliest effective date of the legs
        maturity_date: Latest termination date of the legs
        notional: Receiver leg notional
        currency: Notional currency
        legal_entities_external_references: Party reference to external party id
        legal_entities_names: Party reference to its attributes
            (``name``, ``id``, ``role``)
    """

    trade_date: date
    start_date: date
    maturity_date: date
    notional: float
    currency: str
    legal_entities_external_references: Dict[str, str] = field(default_factory=dict)
    legal_entities_names: Dict[str, Dict[str, str]] = field(default_factory=dict)
