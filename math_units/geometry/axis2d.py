"""Functions on ``Axis2D`` values."""

from typing import TypeVar

from ..types import Angle
from ..units.core import U
from . import direction2d, point2d
from .types import Axis2D, Direction2D, Frame2D, Point2D, Vector2D

C = TypeVar("C")
D = TypeVar("D")


def through(origin: Point2D[U, C], direction: Direction2D[C]) -> Axis2D[U, C]:
    """An axis through origin pointing along direction."""
    return Axis2D(origin, direction)


def through_points(first: Point2D[U, C], second: Point2D[U, C]) -> Axis2D[U, C] | None:
    """The axis from ``first`` towards ``second``, or None if they coincide."""
    if (direction := point2d.direction_to(second, first)) is None:
        return None
    return Axis2D(first, direction)


def x() -> Axis2D[U, C]:
    """The global X axis."""
    return Axis2D(point2d.origin(), direction2d.positive_x())


def y() -> Axis2D[U, C]:
    """The global Y axis."""
    return Axis2D(point2d.origin(), direction2d.positive_y())


def reverse(axis: Axis2D[U, C]) -> Axis2D[U, C]:
    """Flip the direction of an axis, keeping its origin."""
    return Axis2D(axis.origin, -axis.direction)


def move_to(origin: Point2D[U, C], axis: Axis2D[U, C]) -> Axis2D[U, C]:
    """Move an axis to a new origin, keeping its direction."""
    return Axis2D(origin, axis.direction)


def rotate_around(center: Point2D[U, C], angle: Angle, axis: Axis2D[U, C]) -> Axis2D[U, C]:
    """Rotate an axis counterclockwise around a center point."""
    return Axis2D(
        point2d.rotate_around(center, angle, axis.origin),
        direction2d.rotate_by(angle, axis.direction),
    )


def translate_by(vector: Vector2D[U, C], axis: Axis2D[U, C]) -> Axis2D[U, C]:
    """Shift the origin of an axis by a vector."""
    return Axis2D(axis.origin + vector, axis.direction)


def mirror_across(mirror: Axis2D[U, C], axis: Axis2D[U, C]) -> Axis2D[U, C]:
    """Mirror an axis across another axis."""
    return Axis2D(
        point2d.mirror_across(mirror, axis.origin),
        direction2d.mirror_across(mirror, axis.direction),
    )


def place_in(frame: Frame2D[U, C, D], axis: Axis2D[U, D]) -> Axis2D[U, C]:
    """Convert an axis from a frame's local coordinates to global ones."""
    return Axis2D(
        point2d.place_in(frame, axis.origin),
        direction2d.place_in(frame, axis.direction),
    )


def relative_to(frame: Frame2D[U, C, D], axis: Axis2D[U, C]) -> Axis2D[U, D]:
    """Convert an axis from global coordinates to a frame's local ones."""
    return Axis2D(
        point2d.relative_to(frame, axis.origin),
        direction2d.relative_to(frame, axis.direction),
    )
