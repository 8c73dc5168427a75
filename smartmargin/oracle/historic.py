"""
Oracle valuing a plain swap on historic market data scenarios.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence, Union

from smartmargin.curves.calibration import ScenarioCurveCalibrator
from smartmargin.errors import ScenarioNotFound
from smartmargin.scenarios.types import MarketDataScenario
from smartmargin.valuation.products import Swap
from smartmargin.valuation.types import CurveSet

from .base import ValuationOracle

logger = logging.getLogger(__name__)


def _day(dt: Union[date, datetime]) -> date:
    return dt.date() if isinstance(dt, datetime) else dt


class PlainSwapHistoricScenarioOracle(ValuationOracle):
    """
    Values ``notional`` units of a swap on the curves of a dated scenario.

    ``value(t, as_of)`` calibrates the scenario dated ``as_of`` (scenario date
    as curve reference date) and returns the swap value at ``t``, counting
    only payments after ``t``. Calibrated curve sets are cached per date.
    """

    def __init__(
        self,
        product: Swap,
        notional: float,
        scenarios: Sequence[MarketDataScenario],
        calibrator: ScenarioCurveCalibrator = None,
    ):
        self.product = product
        self.notional = notional
        self.calibrator = calibrator or ScenarioCurveCalibrator()
        self._scenarios: Dict[date, MarketDataScenario] = {}
        for scenario in sorted(scenarios, key=lambda s: s.date):
            self._scenarios[scenario.day] = scenario
        self._curves: Dict[date, CurveSet] = {}
        self._lock = threading.Lock()

    @property
    def scenario_dates(self) -> List[datetime]:
        return [s.date for s in self._scenarios.values()]

    def curves(self, market_data_time: Union[date, datetime]) -> CurveSet:
        """Calibrated curves of the scenario dated ``market_data_time``.

        Raises:
            ScenarioNotFound: If no scenario is held for that date
            CalibrationFailure: If the scenario cannot be calibrated
        """
        day = _day(market_data_time)
        with self._lock:
            cached = self._curves.get(day)
        if cached is not None:
            return cached

        scenario = self._scenarios.get(day)
        if scenario is None:
            raise ScenarioNotFound(
                f"No scenario for {day}; available: {[str(d) for d in self._scenarios]}"
            )

        curves = self.calibrator.calibrate(scenario)
        with self._lock:
            return self._curves.setdefault(day, curves)

    def calibrate_all(
        self, max_workers: int = 1, dates: Optional[Iterable[Union[date, datetime]]] = None
    ) -> None:
        """Calibrate scenario dates up front (all of them by default), optionally on a thread pool."""
        days = list(self._scenarios) if dates is None else [_day(d) for d in dates]
        if max_workers <= 1:
            for day in days:
                self.curves(day)
            return
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            # list() re-raises the first calibration failure
            list(pool.map(self.curves, days))

    def _value(self, evaluation_time: datetime, market_data_time: datetime) -> float:
        curves = self.curves(market_data_time)
        value = self.notional * self.product.value(_day(evaluation_time), curves)
        logger.debug(
            "Swap value at %s with market data of %s: %.6f",
            _day(evaluation_time),
            _day(market_data_time),
            value,
        )
        return value
