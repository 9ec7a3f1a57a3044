"""Functions on ``Direction2D`` values.

Example:
    from math_units.catalog import angle
    from math_units.geometry import direction2d

    direction2d.xy(3, 4)  # Direction2D(x=0.6, y=0.8)
    direction2d.xy(0, 0)  # None
    direction2d.to_angle(direction2d.positive_y())  # angle.HALF_PI
"""

import math
from typing import Any, TypeVar

from ..catalog import angle as angles
from ..precision import almost_equal
from ..types import Angle
from .types import Axis2D, Direction2D, Frame2D, Vector2D

C = TypeVar("C")
D = TypeVar("D")


def xy(x: float, y: float) -> Direction2D[C] | None:
    """Construct a direction by normalizing the given components.

    Returns:
        The direction, or None when the components have (approximately) zero or
        non-finite length.
    """
    magnitude = math.hypot(x, y)
    if not math.isfinite(magnitude) or almost_equal(magnitude, 0.0):
        return None
    return Direction2D(x / magnitude, y / magnitude)


def from_angle(angle: Angle) -> Direction2D[C]:
    """The direction at ``angle`` counterclockwise from the positive X direction."""
    return Direction2D(angles.cos(angle), angles.sin(angle))


def positive_x() -> Direction2D[C]:
    """The direction of the positive X axis."""
    return Direction2D(1.0, 0.0)


def positive_y() -> Direction2D[C]:
    """The direction of the positive Y axis."""
    return Direction2D(0.0, 1.0)


def negative_x() -> Direction2D[C]:
    """The direction of the negative X axis."""
    return Direction2D(-1.0, 0.0)


def negative_y() -> Direction2D[C]:
    """The direction of the negative Y axis."""
    return Direction2D(0.0, -1.0)


x = positive_x
y = positive_y


def from_vector(vector: Vector2D[Any, C]) -> Direction2D[C] | None:
    """The direction of a vector, or None for a zero vector."""
    return xy(vector.x.unwrap(), vector.y.unwrap())


def to_angle(direction: Direction2D[Any]) -> Angle:
    """The counterclockwise angle from the positive X direction, in (-pi, pi]."""
    return angles.radians(math.atan2(direction.y, direction.x))


def angle_from(first: Direction2D[C], second: Direction2D[C]) -> Angle:
    """The signed angle to rotate ``first`` counterclockwise onto ``second``."""
    cross = first.x * second.y - first.y * second.x
    dot = first.x * second.x + first.y * second.y
    return angles.radians(math.atan2(cross, dot))


def component_in(other: Direction2D[C], direction: Direction2D[C]) -> float:
    """The dot product of two directions."""
    return direction.x * other.x + direction.y * other.y


def rotate_by(angle: Angle, direction: Direction2D[C]) -> Direction2D[C]:
    """Rotate a direction counterclockwise by an angle."""
    cos, sin = angles.cos(angle), angles.sin(angle)
    return Direction2D(
        cos * direction.x - sin * direction.y, sin * direction.x + cos * direction.y
    )


def rotate_clockwise(direction: Direction2D[C]) -> Direction2D[C]:
    """Rotate a direction a quarter turn clockwise."""
    return Direction2D(direction.y, -direction.x)


def rotate_counterclockwise(direction: Direction2D[C]) -> Direction2D[C]:
    """Rotate a direction a quarter turn counterclockwise."""
    return Direction2D(-direction.y, direction.x)


def reverse(direction: Direction2D[C]) -> Direction2D[C]:
    """The opposite direction."""
    return -direction


def mirror_across(axis: Axis2D[Any, C], direction: Direction2D[C]) -> Direction2D[C]:
    """Mirror a direction across the direction of an axis."""
    a = axis.direction
    dot = direction.x * a.x + direction.y * a.y
    return Direction2D(2.0 * dot * a.x - direction.x, 2.0 * dot * a.y - direction.y)


def place_in(frame: Frame2D[Any, C, D], direction: Direction2D[D]) -> Direction2D[C]:
    """Convert a direction from a frame's local coordinates to global ones."""
    i, j = frame.x_direction, frame.y_direction
    return Direction2D(
        direction.x * i.x + direction.y * j.x,
        direction.x * i.y + direction.y * j.y,
    )


def relative_to(frame: Frame2D[Any, C, D], direction: Direction2D[C]) -> Direction2D[D]:
    """Convert a direction from global coordinates to a frame's local ones."""
    i, j = frame.x_direction, frame.y_direction
    return Direction2D(
        direction.x * i.x + direction.y * i.y,
        direction.x * j.x + direction.y * j.y,
    )
