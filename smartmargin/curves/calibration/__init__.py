"""
Curve calibration: instrument specs, the bootstrapper and scenario calibration.
"""

from .bootstrapper import BootstrapConfig, CurveBootstrapper
from .scenario_curves import ScenarioCurveCalibrator
from .spec import (
    CalibrationContext,
    CalibrationSpec,
    CalibrationSpecProvider,
    CalibrationSpecProviderOis,
)

__all__ = [
    "BootstrapConfig",
    "CurveBootstrapper",
    "ScenarioCurveCalibrator",
    "CalibrationContext",
    "CalibrationSpec",
    "CalibrationSpecProvider",
    "CalibrationSpecProviderOis",
]
