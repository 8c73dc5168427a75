"""Swap valuation.

This package provides:
- Trade and product descriptors parsed from trade documents
- Analytic swap legs and swaps priced on a named curve set
- A factory turning descriptors into products
"""

from .descriptors import (
    InterestRateSwapLegProductDescriptor,
    InterestRateSwapProductDescriptor,
    ScheduleDescriptor,
    TradeDescriptor,
)
from .discounting import get_discount_factor
from .factory import AnalyticProductFactory
from .products import Swap, SwapLeg
from .types import CouponCashflow, CurveSet, LegPV, SwapPV

__all__ = [
    # Types
    "CurveSet",
    "CouponCashflow",
    "LegPV",
    "SwapPV",
    # Descriptors
    "ScheduleDescriptor",
    "InterestRateSwapLegProductDescriptor",
    "InterestRateSwapProductDescriptor",
    "TradeDescriptor",
    # Products
    "SwapLeg",
    "Swap",
    "AnalyticProductFactory",
    "get_discount_factor",
]
