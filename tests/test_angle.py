import math

import pytest

from math_units import quantity
from math_units.catalog import angle, length


def test_unit_conversions():
    assert angle.degrees(180) == angle.PI
    assert angle.turns(1) == angle.TWO_PI
    assert angle.arc_minutes(60) == angle.DEGREE
    assert angle.arc_seconds(3600) == angle.DEGREE
    assert angle.in_degrees(angle.HALF_PI) == pytest.approx(90)
    assert angle.in_turns(angle.PI) == pytest.approx(0.5)


def test_normalize_removes_whole_turns():
    assert angle.normalize(angle.degrees(350)) == angle.normalize(angle.degrees(-10))
    assert angle.normalize(angle.degrees(350)) == angle.degrees(-10)
    assert angle.normalize(angle.degrees(720)) == angle.degrees(0)


@pytest.mark.parametrize("value", [math.pi, -math.pi])
def test_normalize_lands_on_positive_pi(value):
    assert angle.normalize(angle.radians(value)) == angle.PI


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_normalize_of_non_finite_is_nan(value):
    assert quantity.is_nan(angle.normalize(angle.radians(value)))


def test_trigonometry():
    assert angle.sin(angle.HALF_PI) == 1.0
    assert angle.cos(angle.PI) == -1.0
    assert angle.tan(angle.degrees(45)) == pytest.approx(1.0)
    assert angle.asin(1.0) == angle.HALF_PI
    assert angle.acos(-1.0) == angle.PI
    assert angle.atan(1.0) == angle.degrees(45)


@pytest.mark.parametrize("function", [angle.sin, angle.cos, angle.tan])
def test_trigonometry_of_infinite_angle_is_nan(function):
    assert math.isnan(function(angle.radians(math.inf)))


@pytest.mark.parametrize("value", [1.5, -1.01, math.nan])
def test_inverse_trigonometry_out_of_range_is_nan(value):
    assert quantity.is_nan(angle.asin(value))
    assert quantity.is_nan(angle.acos(value))


def test_atan2_of_quantities():
    assert angle.atan2(length.meters(1), length.meters(1)) == angle.degrees(45)
    assert angle.atan2(length.meters(1), length.meters(-1)) == angle.degrees(135)
    assert angle.atan2(length.meters(0), length.meters(-1)) == angle.PI
