"""
Margin of a smart derivative contract between two market data times.
"""

from datetime import datetime

from smartmargin.oracle.base import ValuationOracle


class SmartDerivativeContractMargining:
    """
    Margin from a valuation oracle.

    The margin over (start, end] is the value at ``end`` on the market data
    of ``end`` minus the value at ``end`` on the market data of ``start``:

        margin = oracle.value(end, end) - oracle.value(end, start)

    Both terms are valued at the same time, so the margin isolates the change
    of market data. Works unchanged for scalar and per-path (numpy) values.
    If either value is None, the margin is None.
    """

    def __init__(self, oracle: ValuationOracle):
        self.oracle = oracle

    def get_margin(self, margin_period_start: datetime, margin_period_end: datetime):
        value_with_current = self.oracle.value(margin_period_end, margin_period_end)
        value_with_previous = self.oracle.value(margin_period_end, margin_period_start)
        if value_with_current is None or value_with_previous is None:
            return None
        return value_with_current - value_with_previous
