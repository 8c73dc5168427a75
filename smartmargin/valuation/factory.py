"""Turns product descriptors into priceable analytic products."""

import logging
from datetime import date, datetime
from typing import Union

from .descriptors import (
    InterestRateSwapLegProductDescriptor,
    InterestRateSwapProductDescriptor,
)
from .products import Swap, SwapLeg

logger = logging.getLogger(__name__)


class AnalyticProductFactory:
    """Builds swap legs and swaps whose schedules are anchored at ``reference_date``."""

    def __init__(self, reference_date: Union[date, datetime]):
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        self.reference_date = reference_date

    def get_product_from_descriptor(self, descriptor):
        """Return a :class:`SwapLeg` or :class:`Swap` for the descriptor.

        Raises:
            ValueError: If the descriptor type is not supported
        """
        if isinstance(descriptor, InterestRateSwapLegProductDescriptor):
            return self._build_leg(descriptor)
        if isinstance(descriptor, InterestRateSwapProductDescriptor):
            return Swap(
                self._build_leg(descriptor.leg_receiver),
                self._build_leg(descriptor.leg_payer),
            )
        raise ValueError(
            f"Unsupported product descriptor: {type(descriptor).__name__}"
        )

    def _build_leg(self, descriptor: InterestRateSwapLegProductDescriptor) -> SwapLeg:
        schedule = descriptor.schedule.get_schedule(self.reference_date)
        logger.debug(
            "Built %s leg with %d periods (%s to %s)",
            descriptor.leg_type.value,
            len(schedule),
            schedule.start_date,
            schedule.maturity_date,
        )
        return SwapLeg(
            schedule=schedule,
            forward_curve_name=descriptor.forward_curve_name,
            spread=descriptor.spread,
            discount_curve_name=descriptor.discount_curve_name,
        )
