import math

import pytest

from math_units.catalog import temperature
from math_units.catalog.temperature import Temperature


def test_scales_agree():
    assert temperature.degrees_fahrenheit(212) == temperature.degrees_celsius(100)
    assert temperature.degrees_fahrenheit(-40) == temperature.degrees_celsius(-40)
    assert temperature.degrees_celsius(-273.15) == temperature.ABSOLUTE_ZERO
    assert temperature.in_kelvins(temperature.degrees_celsius(0)) == pytest.approx(273.15)
    assert temperature.in_degrees_fahrenheit(
        temperature.degrees_celsius(37)
    ) == pytest.approx(98.6)


def test_difference_of_temperatures_is_a_delta():
    boiling = temperature.degrees_celsius(100)
    freezing = temperature.degrees_fahrenheit(32)
    delta = boiling - freezing
    assert temperature.in_celsius_degrees(delta) == pytest.approx(100)
    assert temperature.in_fahrenheit_degrees(delta) == pytest.approx(180)
    assert temperature.minus(freezing, boiling) == delta


def test_shifting_by_a_delta():
    start = temperature.degrees_celsius(20)
    warmer = temperature.plus(temperature.fahrenheit_degrees(9), start)
    assert warmer == temperature.degrees_celsius(25)
    assert start + temperature.CELSIUS_DEGREE == temperature.degrees_celsius(21)
    assert start - temperature.CELSIUS_DEGREE == temperature.degrees_celsius(19)


def test_ordering_and_selection():
    temperatures = [temperature.degrees_celsius(x) for x in (30, -5, 12)]
    assert temperature.degrees_celsius(-5) < temperature.degrees_celsius(0)
    assert temperature.minimum(temperatures) == temperature.degrees_celsius(-5)
    assert temperature.maximum(temperatures) == temperature.degrees_celsius(30)
    assert temperature.minimum([]) is None
    assert temperature.maximum([]) is None
    assert temperature.sort(temperatures) == [
        temperature.degrees_celsius(x) for x in (-5, 12, 30)
    ]
    assert temperature.min_of(temperatures[0], temperatures[1]) == temperatures[1]
    assert temperature.max_of(temperatures[0], temperatures[1]) == temperatures[0]


def test_sort_by():
    readings = [("noon", temperature.degrees_celsius(25)), ("dawn", temperature.kelvins(280))]
    assert [name for name, _ in temperature.sort_by(lambda r: r[1], readings)] == [
        "dawn",
        "noon",
    ]


def test_clamp_accepts_bounds_in_either_order():
    low, high = temperature.degrees_celsius(0), temperature.degrees_celsius(100)
    assert temperature.clamp(low, high, temperature.degrees_celsius(150)) == high
    assert temperature.clamp(high, low, temperature.degrees_celsius(-10)) == low


def test_equality_and_hash_are_tolerant():
    first = temperature.kelvins(300.0)
    second = temperature.kelvins(300.0 + 1e-12)
    assert first == second
    assert hash(first) == hash(second)
    assert first != 300.0


def test_nan_and_rounding():
    assert temperature.is_nan(temperature.kelvins(math.nan))
    assert round(temperature.kelvins(300.4)) == temperature.kelvins(300)
    assert round(temperature.kelvins(300.46), 1) == temperature.kelvins(300.5)
    assert round(temperature.kelvins(math.inf)) == temperature.kelvins(math.inf)
    assert temperature.is_nan(round(temperature.kelvins(math.nan)))
    assert repr(Temperature(1.5)) == "Temperature(1.5)"
