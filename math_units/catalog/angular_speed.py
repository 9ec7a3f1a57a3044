"""Angular speeds, stored in radians per second."""

from ..quantity import Quantity
from ..types import AngularSpeed
from . import conversions


def radians_per_second(value: float) -> AngularSpeed:
    """Construct an angular speed from radians per second."""
    return Quantity(value)


def in_radians_per_second(angular_speed: AngularSpeed) -> float:
    """Convert an angular speed to a number of radians per second."""
    return angular_speed.unwrap()


def degrees_per_second(value: float) -> AngularSpeed:
    """Construct an angular speed from a number of degrees per second."""
    return radians_per_second(conversions.DEGREE * value)


def in_degrees_per_second(angular_speed: AngularSpeed) -> float:
    """Convert an angular speed to a number of degrees per second."""
    return in_radians_per_second(angular_speed) / conversions.DEGREE


def turns_per_second(value: float) -> AngularSpeed:
    """Construct an angular speed from a number of turns per second."""
    return radians_per_second(conversions.TURN * value)


def in_turns_per_second(angular_speed: AngularSpeed) -> float:
    """Convert an angular speed to a number of turns per second."""
    return in_radians_per_second(angular_speed) / conversions.TURN


def turns_per_minute(value: float) -> AngularSpeed:
    """Construct an angular speed from a number of turns per minute."""
    return radians_per_second(conversions.TURN * value / conversions.MINUTE)


def in_turns_per_minute(angular_speed: AngularSpeed) -> float:
    """Convert an angular speed to a number of turns per minute."""
    return in_radians_per_second(angular_speed) / (conversions.TURN / conversions.MINUTE)


revolutions_per_second = turns_per_second
in_revolutions_per_second = in_turns_per_second
revolutions_per_minute = turns_per_minute
in_revolutions_per_minute = in_turns_per_minute
