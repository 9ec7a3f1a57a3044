"""Accelerations, stored in meters per second squared."""

from ..quantity import Quantity
from ..types import Acceleration
from . import conversions


def meters_per_second_squared(value: float) -> Acceleration:
    """Construct an acceleration from meters per second squared."""
    return Quantity(value)


def in_meters_per_second_squared(acceleration: Acceleration) -> float:
    """Convert an acceleration to a number of meters per second squared."""
    return acceleration.unwrap()


def feet_per_second_squared(value: float) -> Acceleration:
    """Construct an acceleration from a number of feet per second squared."""
    return meters_per_second_squared(conversions.FOOT * value)


def in_feet_per_second_squared(acceleration: Acceleration) -> float:
    """Convert an acceleration to a number of feet per second squared."""
    return in_meters_per_second_squared(acceleration) / conversions.FOOT


def gees(value: float) -> Acceleration:
    """Construct an acceleration from multiples of standard gravity."""
    return meters_per_second_squared(conversions.GEE * value)


def in_gees(acceleration: Acceleration) -> float:
    """Convert an acceleration to a number of gees (standard gravity)."""
    return in_meters_per_second_squared(acceleration) / conversions.GEE
