"""On-screen pixel quantities.

Pixels have no physical size; convert to and from lengths with a resolution rate
such as ``rate.per(length.inches(1), pixels(96))``.
"""

from ..quantity import Quantity
from ..types import Pixels
from ..units.core import PixelsPerSecond, PixelsPerSecondSquared, SquarePixels


def pixels(value: float) -> Pixels:
    """Construct a number of pixels."""
    return Quantity(value)


def in_pixels(amount: Pixels) -> float:
    """Convert a pixel quantity to a plain float."""
    return amount.unwrap()


def pixels_per_second(value: float) -> Quantity[PixelsPerSecond]:
    """Construct an on-screen speed from a number of pixels per second."""
    return Quantity(value)


def in_pixels_per_second(speed: Quantity[PixelsPerSecond]) -> float:
    """Convert an on-screen speed to a number of pixels per second."""
    return speed.unwrap()


def pixels_per_second_squared(value: float) -> Quantity[PixelsPerSecondSquared]:
    """Construct an on-screen acceleration from pixels per second squared."""
    return Quantity(value)


def in_pixels_per_second_squared(
    acceleration: Quantity[PixelsPerSecondSquared],
) -> float:
    """Convert an on-screen acceleration to pixels per second squared."""
    return acceleration.unwrap()


def square_pixels(value: float) -> Quantity[SquarePixels]:
    """Construct an on-screen area from a number of square pixels."""
    return Quantity(value)


def in_square_pixels(area: Quantity[SquarePixels]) -> float:
    """Convert an on-screen area to a number of square pixels."""
    return area.unwrap()


PIXEL = pixels(1.0)
