"""
Interpolation of discount factors between curve pillars.
"""

from .base import Interpolator
from .factory import create_interpolator
from .linear import LinearDiscountFactorInterpolator
from .step_forward import StepForwardInterpolator

__all__ = [
    "Interpolator",
    "LinearDiscountFactorInterpolator",
    "StepForwardInterpolator",
    "create_interpolator",
]
