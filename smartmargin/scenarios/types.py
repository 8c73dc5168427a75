"""Market data scenario type."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict


@dataclass(frozen=True)
class MarketDataScenario:
    """Curve quotes observed at one instant.

    Attributes:
        date: Observation instant (midnight for daily snapshots)
        curves: Curve label to {tenor: rate}, rates as decimals
    """

    date: datetime
    curves: Dict[str, Dict[str, float]] = field(default_factory=dict)

    @property
    def day(self) -> date:
        return self.date.date()

    @property
    def labels(self):
        return list(self.curves)
