"""
Factory for discount factor interpolators.
"""
from typing import Sequence

from .base import Interpolator
from .linear import LinearDiscountFactorInterpolator
from .step_forward import StepForwardInterpolator


def create_interpolator(
    method: str, pillars: Sequence[float], values: Sequence[float]
) -> Interpolator:
    """
    Create an interpolator based on method name.

    Args:
        method: "STEP_FORWARD" (alias "LOGLINEAR_DF") or "LINEAR_DF"
        pillars: Time points
        values: Discount factors at the time points

    Returns:
        Configured interpolator
    """
    method_upper = method.upper()

    if method_upper in ("STEP_FORWARD", "STEP_FORWARD_CONTINUOUS", "LOGLINEAR_DF"):
        return StepForwardInterpolator(pillars, values)
    if method_upper == "LINEAR_DF":
        return LinearDiscountFactorInterpolator(pillars, values)
    raise ValueError(
        f"Unknown interpolation method: {method}. Available: STEP_FORWARD, LINEAR_DF"
    )
