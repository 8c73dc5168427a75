"""
Seeded Brownian motion increments.
"""

import numpy as np

from .time_discretization import TimeDiscretization


class BrownianMotion:
    """Brownian increments on a time grid, reproducible from ``seed``.

    ``increments`` has shape (time steps, factors, paths).
    """

    def __init__(
        self,
        time_discretization: TimeDiscretization,
        number_of_factors: int,
        number_of_paths: int,
        seed: int,
    ):
        if number_of_factors < 1 or number_of_paths < 1:
            raise ValueError("Need at least one factor and one path")
        self.time_discretization = time_discretization
        self.number_of_factors = number_of_factors
        self.number_of_paths = number_of_paths
        self.seed = seed

        rng = np.random.default_rng(seed)
        normals = rng.standard_normal(
            (time_discretization.number_of_time_steps, number_of_factors, number_of_paths)
        )
        sqrt_dt = np.sqrt(time_discretization.time_steps())
        self.increments = normals * sqrt_dt[:, np.newaxis, np.newaxis]
