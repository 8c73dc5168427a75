"""
Valuation oracle abstractions.

An oracle values a contract at an evaluation time using the market state
observed at a (possibly different) market data time.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

import numpy as np


class ValuationOracle(ABC):
    """Values a contract; ``value(t)`` uses the market state observed at ``t``."""

    def value(self, evaluation_time: datetime, market_data_time: Optional[datetime] = None):
        """
        Value at ``evaluation_time`` using the market state at ``market_data_time``.

        Args:
            evaluation_time: Time the value refers to
            market_data_time: Vintage of the market data; defaults to
                ``evaluation_time``

        Returns:
            The value, or None where a stochastic oracle cannot value
        """
        if market_data_time is None:
            market_data_time = evaluation_time
        return self._value(evaluation_time, market_data_time)

    @abstractmethod
    def _value(self, evaluation_time: datetime, market_data_time: datetime):
        """Value for an explicit market data time."""


class StochasticValuationOracle(ValuationOracle):
    """Oracle whose values are per-path vectors of a simulation."""

    @abstractmethod
    def _value(
        self, evaluation_time: datetime, market_data_time: datetime
    ) -> Optional[np.ndarray]:
        ...

    def average_value(
        self, evaluation_time: datetime, market_data_time: Optional[datetime] = None
    ) -> Optional[float]:
        """Mean over paths of :meth:`value`, or None if the value is unavailable."""
        values = self.value(evaluation_time, market_data_time)
        if values is None:
            return None
        return float(np.mean(values))
