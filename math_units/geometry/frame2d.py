"""Functions on ``Frame2D`` values.

A frame is built from an origin and an X direction; the Y direction is then the
X direction rotated a quarter turn counterclockwise, giving a right-handed frame.
``reverse_x``, ``reverse_y`` and ``mirror_across`` produce left-handed frames.

Example:
    from math_units.catalog import angle
    from math_units.geometry import frame2d, point2d

    frame = frame2d.with_angle(angle.degrees(90), point2d.meters(1, 0))
    local = point2d.meters(2, 0)
    point2d.place_in(frame, local)  # point2d.meters(1, 2)
"""

from typing import Any, TypeVar

from ..precision import almost_equal
from ..types import Angle
from ..units.core import U
from . import axis2d, direction2d, point2d
from .types import Axis2D, Direction2D, Frame2D, Point2D, Vector2D

C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")


# Builders


def at_origin() -> Frame2D[U, C, D]:
    """The global frame: origin at zero with the standard X and Y directions."""
    return at_point(point2d.origin())


def at_point(origin: Point2D[U, C]) -> Frame2D[U, C, D]:
    """A frame aligned with the global axes at the given origin."""
    return Frame2D(origin, direction2d.positive_x(), direction2d.positive_y())


def with_x_direction(x_direction: Direction2D[C], origin: Point2D[U, C]) -> Frame2D[U, C, D]:
    """A right-handed frame with the given X direction."""
    return Frame2D(origin, x_direction, direction2d.rotate_counterclockwise(x_direction))


def with_y_direction(y_direction: Direction2D[C], origin: Point2D[U, C]) -> Frame2D[U, C, D]:
    """A right-handed frame with the given Y direction."""
    return Frame2D(origin, direction2d.rotate_clockwise(y_direction), y_direction)


def with_angle(angle: Angle, origin: Point2D[U, C]) -> Frame2D[U, C, D]:
    """A right-handed frame whose X direction is at ``angle`` from global X."""
    return with_x_direction(direction2d.from_angle(angle), origin)


def from_directions(
    x_direction: Direction2D[C], y_direction: Direction2D[C], origin: Point2D[U, C]
) -> Frame2D[U, C, D] | None:
    """A frame with explicit directions, or None unless they are perpendicular."""
    if not almost_equal(direction2d.component_in(x_direction, y_direction), 0.0):
        return None
    return Frame2D(origin, x_direction, y_direction)


# Accessors


def x_axis(frame: Frame2D[U, C, Any]) -> Axis2D[U, C]:
    """The axis through a frame's origin along its X direction."""
    return axis2d.through(frame.origin, frame.x_direction)


def y_axis(frame: Frame2D[U, C, Any]) -> Axis2D[U, C]:
    """The axis through a frame's origin along its Y direction."""
    return axis2d.through(frame.origin, frame.y_direction)


def is_right_handed(frame: Frame2D[Any, Any, Any]) -> bool:
    """Whether the Y direction is counterclockwise from the X direction."""
    i, j = frame.x_direction, frame.y_direction
    return i.x * j.y - i.y * j.x > 0.0


# Transformations


def reverse_x(frame: Frame2D[U, C, D]) -> Frame2D[U, C, D]:
    """Flip a frame's X direction; this flips its handedness."""
    return Frame2D(frame.origin, -frame.x_direction, frame.y_direction)


def reverse_y(frame: Frame2D[U, C, D]) -> Frame2D[U, C, D]:
    """Flip a frame's Y direction; this flips its handedness."""
    return Frame2D(frame.origin, frame.x_direction, -frame.y_direction)


def move_to(origin: Point2D[U, C], frame: Frame2D[U, C, D]) -> Frame2D[U, C, D]:
    """Move a frame to a new origin, keeping its directions."""
    return Frame2D(origin, frame.x_direction, frame.y_direction)


def rotate_by(angle: Angle, frame: Frame2D[U, C, D]) -> Frame2D[U, C, D]:
    """Rotate a frame's directions around its own origin."""
    return Frame2D(
        frame.origin,
        direction2d.rotate_by(angle, frame.x_direction),
        direction2d.rotate_by(angle, frame.y_direction),
    )


def rotate_around(
    center: Point2D[U, C], angle: Angle, frame: Frame2D[U, C, D]
) -> Frame2D[U, C, D]:
    """Rotate a frame counterclockwise around a center point."""
    return Frame2D(
        point2d.rotate_around(center, angle, frame.origin),
        direction2d.rotate_by(angle, frame.x_direction),
        direction2d.rotate_by(angle, frame.y_direction),
    )


def translate_by(vector: Vector2D[U, C], frame: Frame2D[U, C, D]) -> Frame2D[U, C, D]:
    """Shift the origin of a frame by a vector."""
    return Frame2D(frame.origin + vector, frame.x_direction, frame.y_direction)


def mirror_across(axis: Axis2D[U, C], frame: Frame2D[U, C, D]) -> Frame2D[U, C, D]:
    """Mirror a frame across an axis; this flips its handedness."""
    return Frame2D(
        point2d.mirror_across(axis, frame.origin),
        direction2d.mirror_across(axis, frame.x_direction),
        direction2d.mirror_across(axis, frame.y_direction),
    )


def place_in(reference: Frame2D[U, C, D], frame: Frame2D[U, D, E]) -> Frame2D[U, C, E]:
    """Express a frame defined inside ``reference`` in global coordinates."""
    return Frame2D(
        point2d.place_in(reference, frame.origin),
        direction2d.place_in(reference, frame.x_direction),
        direction2d.place_in(reference, frame.y_direction),
    )


def relative_to(reference: Frame2D[U, C, D], frame: Frame2D[U, C, E]) -> Frame2D[U, D, E]:
    """Express a global frame in the local coordinates of ``reference``."""
    return Frame2D(
        point2d.relative_to(reference, frame.origin),
        direction2d.relative_to(reference, frame.x_direction),
        direction2d.relative_to(reference, frame.y_direction),
    )

