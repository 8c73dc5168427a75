"""
Calibration of a market data scenario into a named curve set.
"""

import logging
from typing import List

from smartmargin.config import MarginConfig
from smartmargin.scenarios.types import MarketDataScenario
from smartmargin.valuation.types import CurveSet

from .bootstrapper import BootstrapConfig, CurveBootstrapper
from .spec import CalibrationContext, CalibrationSpec, CalibrationSpecProviderOis

logger = logging.getLogger(__name__)


class ScenarioCurveCalibrator:
    """Turn each quoted (tenor, rate) point of a scenario into an OIS calibration spec.

    Scenario curve labels are mapped to curve names through
    ``MarginConfig.curve_labels``; curves with unmapped labels are skipped.
    Every mapped curve is calibrated on its own quotes (self-discounted).
    """

    def __init__(self, config: MarginConfig = None):
        self.config = config or MarginConfig()
        self.bootstrap_config = BootstrapConfig(
            interpolation_method=self.config.interpolation_method
        )

    def calibration_specs(self, scenario: MarketDataScenario) -> List[CalibrationSpec]:
        context = CalibrationContext.at(scenario.date)
        specs = []
        for label, points in scenario.curves.items():
            curve_name = self.config.curve_name_for(label)
            if curve_name is None:
                logger.warning("Scenario %s: no curve mapped for label %s", scenario.date, label)
                continue
            for tenor, rate in points.items():
                provider = CalibrationSpecProviderOis(
                    tenor,
                    self.config.calibration_frequency,
                    rate,
                    curve_name=curve_name,
                    calendar=self.config.calendar,
                )
                specs.append(provider.get_calibration_spec(context))
        return specs

    def calibrate(self, scenario: MarketDataScenario) -> CurveSet:
        """Calibrated curve set whose reference date is the scenario date.

        Raises:
            CalibrationFailure: If no curve can be calibrated or a pillar fails
        """
        specs = self.calibration_specs(scenario)
        return CurveBootstrapper(scenario.date, self.bootstrap_config).calibrate(specs)
