"""Speeds, stored in meters per second."""

from ..quantity import Quantity
from ..types import Speed
from . import conversions


def meters_per_second(value: float) -> Speed:
    """Construct a speed from a number of meters per second."""
    return Quantity(value)


def in_meters_per_second(speed: Speed) -> float:
    """Convert a speed to a number of meters per second."""
    return speed.unwrap()


def feet_per_second(value: float) -> Speed:
    """Construct a speed from a number of feet per second."""
    return meters_per_second(conversions.FOOT * value)


def in_feet_per_second(speed: Speed) -> float:
    """Convert a speed to a number of feet per second."""
    return in_meters_per_second(speed) / conversions.FOOT


def kilometers_per_hour(value: float) -> Speed:
    """Construct a speed from a number of kilometers per hour."""
    return meters_per_second(value * conversions.KILOMETER / conversions.HOUR)


def in_kilometers_per_hour(speed: Speed) -> float:
    """Convert a speed to a number of kilometers per hour."""
    return conversions.HOUR * in_meters_per_second(speed) / conversions.KILOMETER


def miles_per_hour(value: float) -> Speed:
    """Construct a speed from a number of miles per hour."""
    return meters_per_second(value * conversions.MILE / conversions.HOUR)


def in_miles_per_hour(speed: Speed) -> float:
    """Convert a speed to a number of miles per hour."""
    return (conversions.HOUR / conversions.MILE) * in_meters_per_second(speed)
