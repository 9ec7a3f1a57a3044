"""Two-dimensional coordinate frame algebra.

Value types live in ``types``; each has a module of functions named after it.
"""

from . import axis2d, direction2d, frame2d, point2d, vector2d
from .types import Axis2D, Direction2D, Frame2D, Point2D, Vector2D

__all__ = [
    "Axis2D",
    "Direction2D",
    "Frame2D",
    "Point2D",
    "Vector2D",
    "axis2d",
    "direction2d",
    "frame2d",
    "point2d",
    "vector2d",
]
