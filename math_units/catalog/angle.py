"""Angles, stored in radians, and the trigonometric functions on them.

Example:
    from math_units.catalog import angle

    angle.normalize(angle.degrees(350)) == angle.degrees(-10)  # True
    angle.sin(angle.HALF_PI)  # 1.0
"""

import math

from ..quantity import Quantity
from ..types import Angle
from ..units.core import U
from . import conversions


def radians(value: float) -> Angle:
    """Construct an angle from a number of radians."""
    return Quantity(value)


def in_radians(angle: Angle) -> float:
    """Convert an angle to a number of radians."""
    return angle.unwrap()


def degrees(value: float) -> Angle:
    """Construct an angle from a number of degrees."""
    return radians(conversions.DEGREE * value)


def in_degrees(angle: Angle) -> float:
    """Convert an angle to a number of degrees."""
    return in_radians(angle) / conversions.DEGREE


def arc_minutes(value: float) -> Angle:
    """Construct an angle from minutes of arc (1/60 of a degree)."""
    return degrees(value / 60.0)


def in_arc_minutes(angle: Angle) -> float:
    """Convert an angle to a number of arc minutes."""
    return 60.0 * in_degrees(angle)


def arc_seconds(value: float) -> Angle:
    """Construct an angle from seconds of arc (1/3600 of a degree)."""
    return degrees(value / 3600.0)


def in_arc_seconds(angle: Angle) -> float:
    """Convert an angle to a number of arc seconds."""
    return 3600.0 * in_degrees(angle)


def turns(value: float) -> Angle:
    """Construct an angle from a number of turns."""
    return radians(conversions.TURN * value)


def in_turns(angle: Angle) -> float:
    """Convert an angle to a number of turns."""
    return in_radians(angle) / conversions.TURN


PI = radians(math.pi)
TWO_PI = radians(2.0 * math.pi)
HALF_PI = radians(math.pi / 2.0)

RADIAN = radians(1.0)
DEGREE = degrees(1.0)
ARC_MINUTE = arc_minutes(1.0)
ARC_SECOND = arc_seconds(1.0)
TURN = turns(1.0)


def normalize(angle: Angle) -> Angle:
    """Bring an angle into the range (-pi, pi] by removing whole turns."""
    value = in_radians(angle)
    if math.isinf(value) or math.isnan(value):
        return radians(math.nan)
    normalized = value - conversions.TURN * round(value / conversions.TURN)
    if normalized > math.pi:
        normalized -= conversions.TURN
    elif normalized <= -math.pi:
        normalized += conversions.TURN
    return radians(normalized)


def _finite_or_nan(value: float) -> float:
    return value if math.isfinite(value) else math.nan


def sin(angle: Angle) -> float:
    """Sine of an angle; infinite angles give NaN."""
    return math.sin(_finite_or_nan(in_radians(angle)))


def cos(angle: Angle) -> float:
    """Cosine of an angle; infinite angles give NaN."""
    return math.cos(_finite_or_nan(in_radians(angle)))


def tan(angle: Angle) -> float:
    """Tangent of an angle; infinite angles give NaN."""
    return math.tan(_finite_or_nan(in_radians(angle)))


def asin(value: float) -> Angle:
    """Inverse sine; values outside [-1, 1] give a NaN angle."""
    return radians(math.asin(value) if -1.0 <= value <= 1.0 else math.nan)


def acos(value: float) -> Angle:
    """Inverse cosine; values outside [-1, 1] give a NaN angle."""
    return radians(math.acos(value) if -1.0 <= value <= 1.0 else math.nan)


def atan(value: float) -> Angle:
    """Construct an angle from a number of atan."""
    return radians(math.atan(value))


def atan2(y: Quantity[U], x: Quantity[U]) -> Angle:
    """The angle of the point ``(x, y)`` from the positive X axis."""
    return radians(math.atan2(y.unwrap(), x.unwrap()))
