"""Functions on ``Vector2D`` values."""

import math
from collections.abc import Sequence
from typing import Any, TypeVar

from ..catalog import angle as angles
from ..catalog import length, pixels as pixel_units
from ..precision import almost_equal
from ..quantity import Quantity
from ..types import Angle
from ..units.core import A, B, Meters, Pixel, Product, Squared, U, Unitless
from . import direction2d
from .types import Axis2D, Direction2D, Frame2D, Vector2D

C = TypeVar("C")
D = TypeVar("D")


# Builders


def xy(x: Quantity[U], y: Quantity[U]) -> Vector2D[U, C]:
    """Construct a vector from two components."""
    return Vector2D(x, y)


def r_theta(r: Quantity[U], theta: Angle) -> Vector2D[U, C]:
    """Construct a vector from polar coordinates."""
    return Vector2D(r * angles.cos(theta), r * angles.sin(theta))


def zero() -> Vector2D[U, C]:
    """The zero vector."""
    return Vector2D(Quantity(0.0), Quantity(0.0))


def meters(x: float, y: float) -> Vector2D[Meters, C]:
    """Construct a vector from components in meters."""
    return Vector2D(length.meters(x), length.meters(y))


def pixels(x: float, y: float) -> Vector2D[Pixel, C]:
    """Construct a vector from components in pixels."""
    return Vector2D(pixel_units.pixels(x), pixel_units.pixels(y))


def unitless(x: float, y: float) -> Vector2D[Unitless, C]:
    """Construct a vector from unitless components."""
    return Vector2D(Quantity(x), Quantity(y))


# Accessors


def magnitude(vector: Vector2D[U, C]) -> Quantity[U]:
    """The length of a vector."""
    return Quantity(_hypot(vector))


def squared_magnitude(vector: Vector2D[U, C]) -> Quantity[Squared[U]]:
    """The squared length of a vector."""
    return vector.x * vector.x + vector.y * vector.y


def _hypot(vector: Vector2D[Any, Any]) -> float:
    return math.hypot(vector.x.unwrap(), vector.y.unwrap())


def dot(other: Vector2D[B, C], vector: Vector2D[A, C]) -> Quantity[Product[A, B]]:
    """The dot product of two vectors."""
    return vector.x * other.x + vector.y * other.y


def cross(other: Vector2D[B, C], vector: Vector2D[A, C]) -> Quantity[Product[A, B]]:
    """The z component of the cross product ``vector x other``."""
    return vector.x * other.y - vector.y * other.x


# Modifiers


def scale_by(scale: float, vector: Vector2D[U, C]) -> Vector2D[U, C]:
    """Multiply both components by a float."""
    return vector * scale


def scale_to(new_length: Quantity[U], vector: Vector2D[U, C]) -> Vector2D[U, C]:
    """Scale a vector to the given length, keeping its direction.

    A zero vector stays a zero vector.
    """
    current = _hypot(vector)
    if almost_equal(current, 0.0):
        return zero()
    return vector * (new_length.unwrap() / current)


def normalize(vector: Vector2D[Any, C]) -> Vector2D[Unitless, C] | None:
    """Divide a vector by its own magnitude, or None for a zero vector."""
    if (direction := direction2d.from_vector(vector)) is None:
        return None
    return unitless(direction.x, direction.y)


def direction(vector: Vector2D[Any, C]) -> Direction2D[C] | None:
    """The direction of a vector, or None for a zero vector."""
    return direction2d.from_vector(vector)


def component_in(direction: Direction2D[C], vector: Vector2D[U, C]) -> Quantity[U]:
    """The length of the projection of a vector onto a direction."""
    return vector.x * direction.x + vector.y * direction.y


def with_length(new_length: Quantity[U], direction: Direction2D[C]) -> Vector2D[U, C]:
    """A vector of the given length pointing along direction."""
    return Vector2D(new_length * direction.x, new_length * direction.y)


def rotate_by(angle: Angle, vector: Vector2D[U, C]) -> Vector2D[U, C]:
    """Rotate a vector counterclockwise by an angle."""
    cos, sin = angles.cos(angle), angles.sin(angle)
    return Vector2D(
        vector.x * cos - vector.y * sin, vector.x * sin + vector.y * cos
    )


def rotate_clockwise_by(angle: Angle, vector: Vector2D[U, C]) -> Vector2D[U, C]:
    """Rotate a vector clockwise by an angle."""
    return rotate_by(-angle, vector)


def mirror_across(axis: Axis2D[Any, C], vector: Vector2D[U, C]) -> Vector2D[U, C]:
    """Mirror a vector across the direction of an axis."""
    a = axis.direction
    projected = component_in(a, vector) * 2.0
    return Vector2D(projected * a.x - vector.x, projected * a.y - vector.y)


def place_in(frame: Frame2D[Any, C, D], vector: Vector2D[U, D]) -> Vector2D[U, C]:
    """Convert a vector from a frame's local coordinates to global ones."""
    i, j = frame.x_direction, frame.y_direction
    return Vector2D(vector.x * i.x + vector.y * j.x, vector.x * i.y + vector.y * j.y)


def relative_to(frame: Frame2D[Any, C, D], vector: Vector2D[U, C]) -> Vector2D[U, D]:
    """Convert a vector from global coordinates to a frame's local ones."""
    return Vector2D(
        component_in(frame.x_direction, vector), component_in(frame.y_direction, vector)
    )


# Lists


def to_list(vector: Vector2D[Any, Any]) -> list[float]:
    """The raw components as [x, y]."""
    return [vector.x.unwrap(), vector.y.unwrap()]


def from_list(values: Sequence[float]) -> Vector2D[U, C] | None:
    """Build a vector from exactly two raw components, otherwise None."""
    match values:
        case [x, y]:
            return Vector2D(Quantity(x), Quantity(y))
        case _:
            return None
