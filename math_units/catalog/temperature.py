"""Absolute temperatures and temperature differences.

A ``Temperature`` is a point on the absolute scale, stored in kelvins. A
``TemperatureDelta`` (``Quantity[CelsiusDegrees]``) is a difference between two
temperatures. The two are deliberately separate types: degrees Celsius as a point
includes an offset of 273.15, while a delta of one Celsius degree is one kelvin.

Example:
    from math_units.catalog import temperature

    boiling = temperature.degrees_celsius(100)
    freezing = temperature.degrees_fahrenheit(32)
    temperature.in_celsius_degrees(boiling - freezing)  # 100.0
"""

import math
from collections.abc import Callable, Iterable
from typing import Self, TypeVar, overload

from ..precision import almost_equal, compare, tolerant_hash
from ..quantity import Quantity
from ..types import TemperatureDelta

T = TypeVar("T")

CELSIUS_OFFSET = 273.15
FAHRENHEIT_PER_CELSIUS = 1.8


class Temperature:
    """An absolute temperature, stored in kelvins."""

    __slots__ = ("_kelvins",)

    def __init__(self, kelvins: float):
        self._kelvins = kelvins

    def unwrap(self) -> float:
        """Return the temperature in kelvins."""
        return self._kelvins

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return almost_equal(self._kelvins, other._kelvins)

    def __hash__(self) -> int:
        return tolerant_hash(self._kelvins)

    def __lt__(self, other: Self) -> bool:
        return compare(self._kelvins, other._kelvins) < 0

    def __le__(self, other: Self) -> bool:
        return compare(self._kelvins, other._kelvins) <= 0

    def __gt__(self, other: Self) -> bool:
        return compare(self._kelvins, other._kelvins) > 0

    def __ge__(self, other: Self) -> bool:
        return compare(self._kelvins, other._kelvins) >= 0

    def __add__(self, delta: TemperatureDelta) -> "Temperature":
        """Shift a temperature by a delta."""
        return Temperature(self._kelvins + delta.unwrap())

    @overload
    def __sub__(self, other: "Temperature") -> TemperatureDelta: ...

    @overload
    def __sub__(self, other: TemperatureDelta) -> "Temperature": ...

    def __sub__(
        self, other: "Temperature | TemperatureDelta"
    ) -> "TemperatureDelta | Temperature":
        """Difference between two temperatures, or a temperature shifted down."""
        if isinstance(other, Temperature):
            return Quantity(self._kelvins - other._kelvins)
        return Temperature(self._kelvins - other.unwrap())

    def __round__(self, ndigits: int | None = None) -> "Temperature":
        if not math.isfinite(self._kelvins):
            return self
        if ndigits is None:
            return Temperature(float(round(self._kelvins)))
        return Temperature(round(self._kelvins, ndigits))

    def __repr__(self) -> str:
        return f"Temperature({self._kelvins!r})"


# Absolute temperatures


def kelvins(value: float) -> Temperature:
    """Construct a temperature from a number of kelvins."""
    return Temperature(value)


def in_kelvins(temperature: Temperature) -> float:
    """Convert a temperature to a number of kelvins."""
    return temperature.unwrap()


def degrees_celsius(value: float) -> Temperature:
    """Construct a temperature from degrees Celsius."""
    return kelvins(CELSIUS_OFFSET + value)


def in_degrees_celsius(temperature: Temperature) -> float:
    """Convert a temperature to a number of degrees celsius."""
    return in_kelvins(temperature) - CELSIUS_OFFSET


def degrees_fahrenheit(value: float) -> Temperature:
    """Construct a temperature from degrees Fahrenheit."""
    return degrees_celsius((value - 32.0) / FAHRENHEIT_PER_CELSIUS)


def in_degrees_fahrenheit(temperature: Temperature) -> float:
    """Convert a temperature to a number of degrees fahrenheit."""
    return 32.0 + FAHRENHEIT_PER_CELSIUS * in_degrees_celsius(temperature)


ABSOLUTE_ZERO = kelvins(0.0)


# Deltas


def celsius_degrees(value: float) -> TemperatureDelta:
    """Construct a temperature difference of Celsius degrees (kelvins)."""
    return Quantity(value)


def in_celsius_degrees(delta: TemperatureDelta) -> float:
    """Convert a temperature difference to a number of celsius degrees."""
    return delta.unwrap()


def fahrenheit_degrees(value: float) -> TemperatureDelta:
    """Construct a temperature difference of Fahrenheit degrees."""
    return celsius_degrees(value / FAHRENHEIT_PER_CELSIUS)


def in_fahrenheit_degrees(delta: TemperatureDelta) -> float:
    """Convert a temperature difference to a number of fahrenheit degrees."""
    return in_celsius_degrees(delta) * FAHRENHEIT_PER_CELSIUS


CELSIUS_DEGREE = celsius_degrees(1.0)
FAHRENHEIT_DEGREE = fahrenheit_degrees(1.0)


# Functions


def plus(delta: TemperatureDelta, temperature: Temperature) -> Temperature:
    """Shift a temperature up by a temperature difference."""
    return temperature + delta


def minus(other: Temperature, temperature: Temperature) -> TemperatureDelta:
    """The difference ``temperature - other``."""
    return temperature - other


def clamp(lower: Temperature, upper: Temperature, temperature: Temperature) -> Temperature:
    """Clamp a temperature between two bounds, given in either order."""
    if upper < lower:
        lower, upper = upper, lower
    return Temperature(min(max(lower.unwrap(), temperature.unwrap()), upper.unwrap()))


def min_of(first: Temperature, second: Temperature) -> Temperature:
    """The colder of two temperatures."""
    return second if second.unwrap() < first.unwrap() else first


def max_of(first: Temperature, second: Temperature) -> Temperature:
    """The hotter of two temperatures."""
    return second if second.unwrap() > first.unwrap() else first


def minimum(temperatures: Iterable[Temperature]) -> Temperature | None:
    """The coldest temperature, or None when there are none."""
    result: Temperature | None = None
    for temperature in temperatures:
        result = temperature if result is None else min_of(result, temperature)
    return result


def maximum(temperatures: Iterable[Temperature]) -> Temperature | None:
    """The hottest temperature, or None when there are none."""
    result: Temperature | None = None
    for temperature in temperatures:
        result = temperature if result is None else max_of(result, temperature)
    return result


def sort(temperatures: Iterable[Temperature]) -> list[Temperature]:
    """Sort temperatures from coldest to hottest."""
    return sorted(temperatures, key=in_kelvins)


def sort_by(key: Callable[[T], Temperature], items: Iterable[T]) -> list[T]:
    """Sort items by a temperature key, coldest first."""
    return sorted(items, key=lambda item: key(item).unwrap())


def is_nan(temperature: Temperature) -> bool:
    """Whether a temperature is NaN."""
    return math.isnan(temperature.unwrap())
