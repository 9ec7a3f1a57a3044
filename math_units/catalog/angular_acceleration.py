"""Angular accelerations, stored in radians per second squared."""

from ..quantity import Quantity
from ..types import AngularAcceleration
from . import conversions


def radians_per_second_squared(value: float) -> AngularAcceleration:
    """Construct an angular acceleration from a number of radians per second squared."""
    return Quantity(value)


def in_radians_per_second_squared(angular_acceleration: AngularAcceleration) -> float:
    """Convert an angular acceleration to a number of radians per second squared."""
    return angular_acceleration.unwrap()


def degrees_per_second_squared(value: float) -> AngularAcceleration:
    """Construct an angular acceleration from a number of degrees per second squared."""
    return radians_per_second_squared(conversions.DEGREE * value)


def in_degrees_per_second_squared(angular_acceleration: AngularAcceleration) -> float:
    """Convert an angular acceleration to a number of degrees per second squared."""
    return in_radians_per_second_squared(angular_acceleration) / conversions.DEGREE


def turns_per_second_squared(value: float) -> AngularAcceleration:
    """Construct an angular acceleration from a number of turns per second squared."""
    return radians_per_second_squared(conversions.TURN * value)


def in_turns_per_second_squared(angular_acceleration: AngularAcceleration) -> float:
    """Convert an angular acceleration to a number of turns per second squared."""
    return in_radians_per_second_squared(angular_acceleration) / conversions.TURN
