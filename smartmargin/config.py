"""Runtime configuration for margin calculations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Dict, Optional

DEFAULT_DISCOUNT_CURVE = "discount-EUR-OIS"
DEFAULT_FORWARD_CURVE = "forward-EUR-6M"


def _default_curve_labels() -> Dict[str, str]:
    return {
        "ESTR": DEFAULT_DISCOUNT_CURVE,
        "EONIA": DEFAULT_DISCOUNT_CURVE,
        "EURIBOR6M": DEFAULT_FORWARD_CURVE,
    }


@dataclass
class MarginConfig:
    """Configuration for the historic-scenario margin pipeline.

    Attributes:
        own_party: FpML party id of the contract owner (its receiver leg is
            the swap's receiver leg)
        discount_curve_name: Curve used to discount both legs
        forward_curve_name: Curve used to project floating legs
        date_pattern: ``strptime`` pattern of the scenario date keys
        curve_labels: Scenario curve label to calibrated curve name
        calibration_frequency: Payment frequency of the calibration swaps
        calendar: Business day calendar for calibration schedules
        interpolation_method: Interpolation of calibrated discount factors
        calibration_workers: Thread count for pre-calibrating scenario dates
    """

    own_party: str = "party1"
    discount_curve_name: str = DEFAULT_DISCOUNT_CURVE
    forward_curve_name: str = DEFAULT_FORWARD_CURVE
    date_pattern: str = "%Y%m%d"
    curve_labels: Dict[str, str] = field(default_factory=_default_curve_labels)
    calibration_frequency: str = "1Y"
    calendar: str = "TARGET"
    interpolation_method: str = "STEP_FORWARD"
    calibration_workers: int = 1

    def curve_name_for(self, label: str) -> Optional[str]:
        """Curve name for a scenario label, matched case-insensitively."""
        wanted = label.upper()
        for key, name in self.curve_labels.items():
            if key.upper() == wanted:
                return name
        return None

    @classmethod
    def from_env(cls, prefix: str = "SMARTMARGIN_") -> "MarginConfig":
        """Build a config, overriding scalar fields from environment variables.

        ``SMARTMARGIN_OWN_PARTY=party2`` overrides ``own_party`` and so on.
        Curve labels are given as ``LABEL=curve,LABEL=curve`` in
        ``SMARTMARGIN_CURVE_LABELS``.
        """
        config = cls()
        for f in fields(cls):
            raw = os.getenv(prefix + f.name.upper())
            if raw is None:
                continue
            if f.name == "curve_labels":
                config.curve_labels = dict(
                    item.split("=", 1) for item in raw.split(",") if "=" in item
                )
            elif f.name == "calibration_workers":
                config.calibration_workers = int(raw)
            else:
                setattr(config, f.name, raw)
        return config


@dataclass
class GBMOracleConfig:
    """Parameters of the geometric Brownian motion test oracle."""

    initial_value: float = 1.0
    time_horizon: float = 20.0
    risk_free_rate: float = 0.02
    volatility: float = 0.10
    number_of_paths: int = 1000
    seed: int = 31415
    time_step: float = 1.0 / 365.0
