"""
Sequential curve bootstrap from calibration specs.

For each calibration curve the specs are processed in order of calibration
time. Each spec adds one pillar whose discount factor is solved by
bisection so that the spec's instrument has zero value at the reference date.
Curves are bootstrapped in the order their names first appear, so a curve
may reference curves calibrated before it.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, List, Tuple, Union

from smartmargin.curves.discount import DiscountCurve
from smartmargin.errors import CalibrationFailure
from smartmargin.valuation.products import Swap, SwapLeg
from smartmargin.valuation.types import CurveSet

from .spec import CalibrationSpec

logger = logging.getLogger(__name__)


@dataclass
class BootstrapConfig:
    """Configuration for bootstrap process."""

    interpolation_method: str = "STEP_FORWARD"
    tolerance: float = 1e-12
    max_iterations: int = 200


class CurveBootstrapper:
    """Bootstrap discount curves from calibration specs."""

    def __init__(
        self,
        reference_date: Union[date, datetime],
        config: BootstrapConfig = None,
    ):
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        self.reference_date = reference_date
        self.config = config or BootstrapConfig()

    def calibrate(self, specs: Iterable[CalibrationSpec]) -> CurveSet:
        """
        Calibrate all curves named by the specs.

        Args:
            specs: Calibration specs, in any order

        Returns:
            Curve set with one curve per calibration curve name

        Raises:
            CalibrationFailure: If a pillar cannot be solved or a spec
                references a curve that is not calibrated
        """
        groups: "OrderedDict[str, List[CalibrationSpec]]" = OrderedDict()
        for spec in specs:
            groups.setdefault(spec.calibration_curve, []).append(spec)

        if not groups:
            raise CalibrationFailure(f"No calibration specs for {self.reference_date}")

        curves = CurveSet(reference_date=self.reference_date)
        for curve_name, curve_specs in groups.items():
            curves.add(self._bootstrap_curve(curve_name, curve_specs, curves))

        logger.info(
            "Calibrated %d curve(s) for %s: %s",
            len(curves),
            self.reference_date,
            ", ".join(curves),
        )
        return curves

    def _bootstrap_curve(
        self, curve_name: str, specs: List[CalibrationSpec], calibrated: CurveSet
    ) -> DiscountCurve:
        times: List[float] = []
        discount_factors: List[float] = []

        for spec in sorted(specs, key=lambda s: s.calibration_time):
            if spec.calibration_time <= 0.0:
                raise CalibrationFailure(
                    f"{spec.label}: calibration time {spec.calibration_time} is not after "
                    f"the reference date {self.reference_date}"
                )
            if times and spec.calibration_time <= times[-1]:
                raise CalibrationFailure(
                    f"{spec.label}: duplicate calibration time {spec.calibration_time:.6f} "
                    f"on curve {curve_name}"
                )

            swap = Swap(
                SwapLeg(
                    spec.receiver_schedule,
                    spec.receiver_forward_curve,
                    spec.receiver_spread,
                    spec.receiver_discount_curve,
                ),
                SwapLeg(
                    spec.payer_schedule,
                    spec.payer_forward_curve,
                    spec.payer_spread,
                    spec.payer_discount_curve,
                ),
            )

            def residual(df_candidate: float) -> float:
                trial = CurveSet(
                    reference_date=self.reference_date,
                    curves=dict(calibrated.curves),
                )
                trial.add(
                    self._make_curve(
                        curve_name,
                        times + [spec.calibration_time],
                        discount_factors + [df_candidate],
                    )
                )
                return swap.value(self.reference_date, trial)

            try:
                lower, upper = self._bracket_solution(residual)
            except ValueError as e:
                logger.error(
                    "Failed to bracket %s (time %.6f, rate %.6f) on %s",
                    spec.label,
                    spec.calibration_time,
                    spec.payer_spread,
                    curve_name,
                )
                raise CalibrationFailure(f"{spec.label}: {e}") from e

            df = self._bisect_solution(residual, lower, upper)
            times.append(spec.calibration_time)
            discount_factors.append(df)

            logger.debug(
                "  %s: time=%.6f, rate=%.6f, DF=%.10f",
                spec.label,
                spec.calibration_time,
                spec.payer_spread,
                df,
            )

        return self._make_curve(curve_name, times, discount_factors)

    def _make_curve(
        self, name: str, times: List[float], discount_factors: List[float]
    ) -> DiscountCurve:
        return DiscountCurve(
            reference_date=self.reference_date,
            pillar_times=times,
            discount_factors=discount_factors,
            interpolation_method=self.config.interpolation_method,
            name=name,
        )

    def _bracket_solution(self, residual: Callable[[float], float]) -> Tuple[float, float]:
        """Find discount factors on both sides of the root."""
        # Negative rates push discount factors above 1
        lower = 0.01
        upper = 1.5

        res_lower = residual(lower)
        res_upper = residual(upper)

        attempts = 0
        while res_lower * res_upper > 0 and attempts < 20:
            if abs(res_lower) < abs(res_upper):
                lower *= 0.5
                res_lower = residual(lower)
            else:
                upper *= 1.2
                res_upper = residual(upper)
            attempts += 1

        if res_lower * res_upper > 0:
            raise ValueError(
                f"Unable to bracket solution: "
                f"f({lower}) = {res_lower}, f({upper}) = {res_upper}"
            )

        return lower, upper

    def _bisect_solution(
        self, residual: Callable[[float], float], lower: float, upper: float
    ) -> float:
        res_lower = residual(lower)

        for _ in range(self.config.max_iterations):
            mid = 0.5 * (lower + upper)
            res_mid = residual(mid)

            if abs(res_mid) < self.config.tolerance or abs(upper - lower) < self.config.tolerance:
                return mid

            if res_lower * res_mid <= 0:
                upper = mid
            else:
                lower = mid
                res_lower = res_mid

        return 0.5 * (lower + upper)
