"""Two-dimensional geometry value types.

Every type carries a phantom ``C`` parameter naming the coordinate system its
values are expressed in, so that points from different frames cannot be mixed up.
A ``Frame2D[U, C, D]`` lives in coordinates ``C`` and defines the local
coordinates ``D``; ``place_in`` converts from ``D`` to ``C`` and ``relative_to``
converts back.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload

from ..precision import almost_equal, tolerant_hash
from ..quantity import Quantity
from ..units.core import U

C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True, eq=False)
class Direction2D(Generic[C]):
    """A unit-length direction in coordinates ``C``.

    The constructor does not normalize; use ``direction2d.xy`` for arbitrary
    components.
    """

    x: float
    y: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction2D):
            return NotImplemented
        return almost_equal(self.x, other.x) and almost_equal(self.y, other.y)

    def __hash__(self) -> int:
        return tolerant_hash(self.x, self.y)

    def __neg__(self) -> "Direction2D[C]":
        return Direction2D(-self.x, -self.y)


@dataclass(frozen=True)
class Vector2D(Generic[U, C]):
    """A displacement with components of unit ``U`` in coordinates ``C``."""

    x: Quantity[U]
    y: Quantity[U]

    def __add__(self, other: "Vector2D[U, C]") -> "Vector2D[U, C]":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D[U, C]") -> "Vector2D[U, C]":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D[U, C]":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scale: float) -> "Vector2D[U, C]":
        return Vector2D(self.x * scale, self.y * scale)

    def __rmul__(self, scale: float) -> "Vector2D[U, C]":
        return Vector2D(self.x * scale, self.y * scale)

    def __truediv__(self, divisor: float) -> "Vector2D[U, C]":
        return Vector2D(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class Point2D(Generic[U, C]):
    """A position with coordinates of unit ``U`` in coordinates ``C``."""

    x: Quantity[U]
    y: Quantity[U]

    def __add__(self, vector: Vector2D[U, C]) -> "Point2D[U, C]":
        return Point2D(self.x + vector.x, self.y + vector.y)

    @overload
    def __sub__(self, other: "Point2D[U, C]") -> Vector2D[U, C]: ...

    @overload
    def __sub__(self, other: Vector2D[U, C]) -> "Point2D[U, C]": ...

    def __sub__(self, other: "Point2D[U, C] | Vector2D[U, C]") -> Any:
        """The vector between two points, or a point moved back by a vector."""
        if isinstance(other, Point2D):
            return Vector2D(self.x - other.x, self.y - other.y)
        return Point2D(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Axis2D(Generic[U, C]):
    """An infinite directed line through an origin point."""

    origin: Point2D[U, C]
    direction: Direction2D[C]


@dataclass(frozen=True)
class Frame2D(Generic[U, C, D]):
    """An origin and a pair of perpendicular unit directions.

    The frame is positioned in coordinates ``C`` and defines local coordinates
    ``D``.
    """

    origin: Point2D[U, C]
    x_direction: Direction2D[C]
    y_direction: Direction2D[C]
