"""
Black-Scholes asset model simulated with an Euler scheme.

The scheme is applied to the log of the asset,

    X(t + dt) = X(t) + (r - sigma^2 / 2) dt + sigma dW,    S = exp(X),

so paths stay positive. Any overflow or invalid value raises
:class:`~smartmargin.errors.SimulationFailure`.
"""

import logging
from dataclasses import dataclass

import numpy as np

from smartmargin.errors import SimulationFailure

from .brownian import BrownianMotion
from .time_discretization import TimeDiscretization

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlackScholesModel:
    """Lognormal asset with constant drift and volatility."""

    initial_value: float
    risk_free_rate: float
    volatility: float

    def __post_init__(self):
        if self.initial_value <= 0.0:
            raise ValueError(f"Initial value must be positive: {self.initial_value}")
        if self.volatility < 0.0:
            raise ValueError(f"Volatility must be non-negative: {self.volatility}")

    @property
    def log_drift(self) -> float:
        return self.risk_free_rate - 0.5 * self.volatility**2


class MonteCarloAssetModel:
    """Simulated paths of a :class:`BlackScholesModel`.

    Paths are generated when the object is built; ``asset_value(i)`` returns
    the per-path values at grid index ``i``.
    """

    def __init__(self, model: BlackScholesModel, brownian_motion: BrownianMotion):
        self.model = model
        self.brownian_motion = brownian_motion
        self._values = self._simulate()

    @property
    def time_discretization(self) -> TimeDiscretization:
        return self.brownian_motion.time_discretization

    @property
    def number_of_paths(self) -> int:
        return self.brownian_motion.number_of_paths

    def _simulate(self) -> np.ndarray:
        grid = self.time_discretization
        dt = grid.time_steps()
        dw = self.brownian_motion.increments[:, 0, :]

        try:
            with np.errstate(over="raise", invalid="raise"):
                steps = self.model.log_drift * dt[:, np.newaxis] + self.model.volatility * dw
                log_paths = np.empty((len(grid), self.number_of_paths))
                log_paths[0] = np.log(self.model.initial_value)
                np.cumsum(steps, axis=0, out=log_paths[1:])
                log_paths[1:] += log_paths[0]
                values = np.exp(log_paths)
        except FloatingPointError as e:
            raise SimulationFailure(f"Euler step failed: {e}") from e

        if not np.all(np.isfinite(values)):
            bad = int(np.argmax(~np.all(np.isfinite(values), axis=1)))
            raise SimulationFailure(
                f"Non-finite asset value at time {grid.time(bad):.6f}"
            )

        logger.debug(
            "Simulated %d paths on %d time steps", self.number_of_paths, grid.number_of_time_steps
        )
        return values

    def asset_value(self, time_index: int) -> np.ndarray:
        return self._values[time_index].copy()
