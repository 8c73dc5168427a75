"""
Monte Carlo building blocks for the stochastic valuation oracle.
"""

from .brownian import BrownianMotion
from .gbm import BlackScholesModel, MonteCarloAssetModel
from .lazy import InitOnce
from .time_discretization import TimeDiscretization

__all__ = [
    "BlackScholesModel",
    "BrownianMotion",
    "InitOnce",
    "MonteCarloAssetModel",
    "TimeDiscretization",
]
