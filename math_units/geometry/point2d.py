"""Functions on ``Point2D`` values.

Example:
    from math_units.catalog import length
    from math_units.geometry import point2d, vector2d

    start = point2d.meters(1, 2)
    end = point2d.translate_by(vector2d.meters(3, 4), start)
    point2d.distance_to(start, end)  # length.meters(5)
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from .. import quantity
from ..catalog import angle as angles
from ..catalog import length, pixels as pixel_units
from ..quantity import Quantity
from ..types import Angle
from ..units.core import Meters, Pixel, Squared, U, Unitless
from . import direction2d, vector2d
from .types import Axis2D, Direction2D, Frame2D, Point2D, Vector2D

C = TypeVar("C")
D = TypeVar("D")


# Builders


def xy(x: Quantity[U], y: Quantity[U]) -> Point2D[U, C]:
    """Construct a point from two coordinates."""
    return Point2D(x, y)


def r_theta(r: Quantity[U], theta: Angle) -> Point2D[U, C]:
    """Construct a point from polar coordinates around the origin."""
    return Point2D(r * angles.cos(theta), r * angles.sin(theta))


def origin() -> Point2D[U, C]:
    """The point at zero in both coordinates."""
    return Point2D(Quantity(0.0), Quantity(0.0))


def meters(x: float, y: float) -> Point2D[Meters, C]:
    """Construct a point from coordinates in meters."""
    return Point2D(length.meters(x), length.meters(y))


def pixels(x: float, y: float) -> Point2D[Pixel, C]:
    """Construct a point from coordinates in pixels."""
    return Point2D(pixel_units.pixels(x), pixel_units.pixels(y))


def unitless(x: float, y: float) -> Point2D[Unitless, C]:
    """Construct a point from unitless coordinates."""
    return Point2D(Quantity(x), Quantity(y))


# Queries


def vector_to(target: Point2D[U, C], start: Point2D[U, C]) -> Vector2D[U, C]:
    """The vector from ``start`` to ``target``."""
    return target - start


def direction_to(target: Point2D[U, C], start: Point2D[U, C]) -> Direction2D[C] | None:
    """The direction from ``start`` to ``target``, or None if they coincide."""
    return direction2d.from_vector(vector_to(target, start))


def distance_squared_to(first: Point2D[U, C], second: Point2D[U, C]) -> Quantity[Squared[U]]:
    """The squared distance between two points."""
    return vector2d.squared_magnitude(first - second)


def distance_to(first: Point2D[U, C], second: Point2D[U, C]) -> Quantity[U]:
    """The distance between two points."""
    return vector2d.magnitude(first - second)


def midpoint(first: Point2D[U, C], second: Point2D[U, C]) -> Point2D[U, C]:
    """The point halfway between two points."""
    return Point2D(
        quantity.midpoint(first.x, second.x), quantity.midpoint(first.y, second.y)
    )


def interpolate_from(
    start: Point2D[U, C], end: Point2D[U, C], parameter: float
) -> Point2D[U, C]:
    """Interpolate between two points; parameters outside [0, 1] extrapolate."""
    return Point2D(
        quantity.interpolate_from(start.x, end.x, parameter),
        quantity.interpolate_from(start.y, end.y, parameter),
    )


# Transformations


def translate_by(vector: Vector2D[U, C], point: Point2D[U, C]) -> Point2D[U, C]:
    """Shift a point by a vector."""
    return point + vector


def translate_in(
    direction: Direction2D[C], distance: Quantity[U], point: Point2D[U, C]
) -> Point2D[U, C]:
    """Move a point a distance in a direction."""
    return point + vector2d.with_length(distance, direction)


def along(axis: Axis2D[U, C], distance: Quantity[U]) -> Point2D[U, C]:
    """The point at a signed distance along an axis from its origin."""
    return translate_in(axis.direction, distance, axis.origin)


def rotate_around(
    center: Point2D[U, C], angle: Angle, point: Point2D[U, C]
) -> Point2D[U, C]:
    """Rotate a point counterclockwise around a center point."""
    return center + vector2d.rotate_by(angle, point - center)


def mirror_across(axis: Axis2D[U, C], point: Point2D[U, C]) -> Point2D[U, C]:
    """Mirror a point across an axis.

    The result lies at the same distance from the axis, on the opposite side.
    """
    return axis.origin + vector2d.mirror_across(axis, point - axis.origin)


def place_in(frame: Frame2D[U, C, D], point: Point2D[U, D]) -> Point2D[U, C]:
    """Convert a point from a frame's local coordinates to global ones."""
    i, j = frame.x_direction, frame.y_direction
    return Point2D(
        frame.origin.x + point.x * i.x + point.y * j.x,
        frame.origin.y + point.x * i.y + point.y * j.y,
    )


def relative_to(frame: Frame2D[U, C, D], point: Point2D[U, C]) -> Point2D[U, D]:
    """Convert a point from global coordinates to a frame's local ones."""
    offset = point - frame.origin
    return Point2D(
        vector2d.component_in(frame.x_direction, offset),
        vector2d.component_in(frame.y_direction, offset),
    )


# Centroids


def centroid(first: Point2D[U, C], rest: Sequence[Point2D[U, C]]) -> Point2D[U, C]:
    """The average of one or more points.

    Offsets are summed relative to ``first`` to limit cancellation error.
    """
    count = 1 + len(rest)
    dx = quantity.sum(point.x - first.x for point in rest)
    dy = quantity.sum(point.y - first.y for point in rest)
    return Point2D(first.x + dx / count, first.y + dy / count)


def centroid3(
    first: Point2D[U, C], second: Point2D[U, C], third: Point2D[U, C]
) -> Point2D[U, C]:
    """The average of three points."""
    return Point2D(
        first.x + (second.x - first.x) / 3.0 + (third.x - first.x) / 3.0,
        first.y + (second.y - first.y) / 3.0 + (third.y - first.y) / 3.0,
    )


def centroid_n(points: Sequence[Point2D[U, C]]) -> Point2D[U, C] | None:
    """The average of any number of points, or None for no points."""
    match points:
        case [first, *rest]:
            return centroid(first, rest)
        case _:
            return None


# Conversions


def round_to(digits: int, point: Point2D[U, C]) -> Point2D[U, C]:
    """Round both coordinates to the given number of decimal digits."""
    return Point2D(
        quantity.round_to(digits, point.x), quantity.round_to(digits, point.y)
    )


def to_list(point: Point2D[Any, Any]) -> list[float]:
    """The raw coordinates as [x, y]."""
    return [point.x.unwrap(), point.y.unwrap()]


def from_list(values: Sequence[float]) -> Point2D[U, C] | None:
    """Build a point from exactly two raw coordinates, otherwise None."""
    match values:
        case [x, y]:
            return Point2D(Quantity(x), Quantity(y))
        case _:
            return None
