"""Tests for discount curves and interpolation."""

import math
from datetime import date

import pytest

from smartmargin.curves import DiscountCurve
from smartmargin.interpolation import (
    LinearDiscountFactorInterpolator,
    StepForwardInterpolator,
    create_interpolator,
)

REFERENCE_DATE = date(2020, 1, 15)


class TestDiscountCurve:
    def test_anchored_at_reference_date(self):
        curve = DiscountCurve(REFERENCE_DATE, [1.0, 2.0], [0.99, 0.97])

        assert curve.pillar_times[0] == 0.0
        assert curve.df(0.0) == 1.0
        assert curve.df(REFERENCE_DATE) == 1.0
        assert curve.df(date(2020, 1, 10)) == 1.0
        assert curve.df(-0.5) == 1.0

    def test_pillars_are_reproduced(self):
        curve = DiscountCurve(REFERENCE_DATE, [2.0, 1.0], [0.97, 0.99])

        assert curve.df(1.0) == pytest.approx(0.99)
        assert curve.df(2.0) == pytest.approx(0.97)

    def test_step_forward_between_pillars(self):
        curve = DiscountCurve(REFERENCE_DATE, [1.0, 2.0], [0.99, 0.97])

        assert curve.df(1.5) == pytest.approx(math.sqrt(0.99 * 0.97))

    def test_linear_interpolation(self):
        curve = DiscountCurve(
            REFERENCE_DATE, [1.0, 2.0], [0.99, 0.97], interpolation_method="LINEAR_DF"
        )

        assert curve.df(1.5) == pytest.approx(0.98)

    def test_flat_rate_curve(self):
        curve = DiscountCurve.from_flat_rate(REFERENCE_DATE, 0.02, name="flat")

        assert curve.df(10.0) == pytest.approx(math.exp(-0.2))
        assert curve.zero(5.0) == pytest.approx(0.02)
        assert curve.name == "flat"

    def test_simple_forward(self):
        curve = DiscountCurve.from_flat_rate(REFERENCE_DATE, 0.02)

        forward = curve.forward(date(2021, 1, 15), date(2021, 7, 15), 0.5)

        expected = (curve.df(date(2021, 1, 15)) / curve.df(date(2021, 7, 15)) - 1.0) / 0.5
        assert forward == pytest.approx(expected)
        with pytest.raises(ValueError):
            curve.forward(1.0, 1.0, 0.0)

    def test_negative_rates_allowed(self):
        curve = DiscountCurve(REFERENCE_DATE, [1.0], [1.005])

        assert curve.df(0.5) > 1.0
        assert curve.get_pillar_info()[1][2] == pytest.approx(-math.log(1.005))

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            DiscountCurve(REFERENCE_DATE, [1.0], [0.0])
        with pytest.raises(ValueError):
            DiscountCurve(REFERENCE_DATE, [1.0, 2.0], [0.99])
        with pytest.raises(ValueError):
            DiscountCurve(REFERENCE_DATE, [], [])


class TestInterpolators:
    def test_factory(self):
        assert isinstance(
            create_interpolator("loglinear_df", [0.0, 1.0], [1.0, 0.99]), StepForwardInterpolator
        )
        assert isinstance(
            create_interpolator("LINEAR_DF", [0.0, 1.0], [1.0, 0.99]),
            LinearDiscountFactorInterpolator,
        )
        with pytest.raises(ValueError):
            create_interpolator("CUBIC", [0.0, 1.0], [1.0, 0.99])

    def test_extrapolates_last_forward(self):
        interpolator = StepForwardInterpolator([0.0, 1.0, 2.0], [1.0, 0.99, 0.97])

        assert interpolator.interpolate(3.0) == pytest.approx(0.97 * 0.97 / 0.99)

    def test_duplicate_pillars(self):
        with pytest.raises(ValueError):
            StepForwardInterpolator([0.0, 1.0, 1.0], [1.0, 0.99, 0.98])
