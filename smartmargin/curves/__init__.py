"""
Discount curves and their calibration.

Calibration lives in ``smartmargin.curves.calibration`` and is imported
from there explicitly.
"""

from .base import BaseCurve, Curve
from .discount import DiscountCurve

__all__ = ["BaseCurve", "Curve", "DiscountCurve"]
