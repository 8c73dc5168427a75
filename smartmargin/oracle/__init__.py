"""
Valuation oracles.
"""

from .base import StochasticValuationOracle, ValuationOracle
from .gbm import GeometricBrownianMotionOracle
from .historic import PlainSwapHistoricScenarioOracle

__all__ = [
    "ValuationOracle",
    "StochasticValuationOracle",
    "GeometricBrownianMotionOracle",
    "PlainSwapHistoricScenarioOracle",
]
