"""
Stochastic oracle generating values from a geometric Brownian motion.

Used for testing and demonstrating margining; it values a fictitious asset,
not a contract.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Optional

import numpy as np

from smartmargin.config import GBMOracleConfig
from smartmargin.conventions.daycount import floating_point_date
from smartmargin.errors import SimulationFailure
from smartmargin.simulation import (
    BlackScholesModel,
    BrownianMotion,
    InitOnce,
    MonteCarloAssetModel,
    TimeDiscretization,
)

from .base import StochasticValuationOracle

logger = logging.getLogger(__name__)


class GeometricBrownianMotionOracle(StochasticValuationOracle):
    """
    Oracle whose values are Monte Carlo paths of a Black-Scholes asset.

    The simulation is built on the first valuation, once, however many
    threads ask concurrently. A prebuilt ``simulation`` may be passed instead.

    ``value(t)`` is the simulated asset at the largest grid time not after
    ``t`` (ACT/365 from ``initial_time``). ``value(t, as_of)`` is the value
    at the grid time of ``as_of`` accrued to ``t`` at the risk-free rate.
    Evaluation before ``initial_time`` or beyond the horizon raises
    ``ValueError``; if the simulation fails numerically, a warning is logged
    and None is returned.
    """

    def __init__(
        self,
        initial_time: Optional[datetime] = None,
        initial_value: float = 1.0,
        time_horizon: float = 20.0,
        risk_free_rate: float = 0.02,
        volatility: float = 0.10,
        number_of_paths: int = 1000,
        seed: int = 31415,
        time_discretization: Optional[TimeDiscretization] = None,
        simulation: Optional[MonteCarloAssetModel] = None,
    ):
        """
        Args:
            initial_time: Instant of grid time 0. Defaults to now, which makes
                every instance a different oracle.
            initial_value: Asset value at the initial time
            time_horizon: Last grid time in years (ACT/365)
            risk_free_rate: Drift of the asset
            volatility: Lognormal volatility
            number_of_paths: Number of simulated paths
            seed: Seed of the Brownian motion
            time_discretization: Simulation grid; daily steps up to
                ``time_horizon`` if omitted
            simulation: Prebuilt simulation to use instead of building one
        """
        self.initial_time = initial_time if initial_time is not None else datetime.now()
        self.time_discretization = time_discretization or TimeDiscretization.from_step(
            0.0, time_horizon, 1.0 / 365.0
        )
        self.model = BlackScholesModel(initial_value, risk_free_rate, volatility)
        self.number_of_paths = number_of_paths
        self.seed = seed

        if simulation is not None:
            self._simulation = InitOnce.ready(simulation)
        else:
            self._simulation = InitOnce(self._build_simulation)

    @classmethod
    def from_config(
        cls, initial_time: datetime, config: GBMOracleConfig
    ) -> "GeometricBrownianMotionOracle":
        return cls(
            initial_time,
            initial_value=config.initial_value,
            risk_free_rate=config.risk_free_rate,
            volatility=config.volatility,
            number_of_paths=config.number_of_paths,
            seed=config.seed,
            time_discretization=TimeDiscretization.from_step(
                0.0, config.time_horizon, config.time_step
            ),
        )

    @property
    def risk_free_rate(self) -> float:
        return self.model.risk_free_rate

    def _build_simulation(self) -> MonteCarloAssetModel:
        logger.info(
            "Building GBM simulation: %d paths, %d steps, seed %d",
            self.number_of_paths,
            self.time_discretization.number_of_time_steps,
            self.seed,
        )
        brownian_motion = BrownianMotion(
            self.time_discretization,
            number_of_factors=1,
            number_of_paths=self.number_of_paths,
            seed=self.seed,
        )
        return MonteCarloAssetModel(self.model, brownian_motion)

    @property
    def simulation(self) -> MonteCarloAssetModel:
        """The simulation, built on first access."""
        return self._simulation.get()

    def _grid_time(self, dt: datetime) -> float:
        t = floating_point_date(self.initial_time, dt)
        if t < self.time_discretization.first_time:
            raise ValueError(f"{dt} is before the oracle's initial time {self.initial_time}")
        return t

    def _value(
        self, evaluation_time: datetime, market_data_time: datetime
    ) -> Optional[np.ndarray]:
        t_evaluation = self._grid_time(evaluation_time)
        t_market_data = self._grid_time(market_data_time)
        index = self.time_discretization.time_index_nearest_less_or_equal(t_market_data)

        try:
            values = self.simulation.asset_value(index)
        except SimulationFailure as e:
            logger.warning("Oracle valuation failed with %s", e)
            return None

        if evaluation_time == market_data_time:
            return values
        return values * math.exp(self.risk_free_rate * (t_evaluation - t_market_data))
