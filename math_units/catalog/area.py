"""Areas, stored in square meters."""

from ..quantity import Quantity
from ..types import Area
from . import conversions


def square_meters(value: float) -> Area:
    """Construct an area from a number of square meters."""
    return Quantity(value)


def in_square_meters(area: Area) -> float:
    """Convert an area to a number of square meters."""
    return area.unwrap()


def square_millimeters(value: float) -> Area:
    """Construct an area from a number of square millimeters."""
    return square_meters(1.0e-6 * value)


def in_square_millimeters(area: Area) -> float:
    """Convert an area to a number of square millimeters."""
    return 1.0e6 * in_square_meters(area)


def square_centimeters(value: float) -> Area:
    """Construct an area from a number of square centimeters."""
    return square_meters(1.0e-4 * value)


def in_square_centimeters(area: Area) -> float:
    """Convert an area to a number of square centimeters."""
    return 1.0e4 * in_square_meters(area)


def hectares(value: float) -> Area:
    """Construct an area from a number of hectares."""
    return square_meters(1.0e4 * value)


def in_hectares(area: Area) -> float:
    """Convert an area to a number of hectares."""
    return 1.0e-4 * in_square_meters(area)


def square_kilometers(value: float) -> Area:
    """Construct an area from a number of square kilometers."""
    return square_meters(1.0e6 * value)


def in_square_kilometers(area: Area) -> float:
    """Convert an area to a number of square kilometers."""
    return 1.0e-6 * in_square_meters(area)


def square_inches(value: float) -> Area:
    """Construct an area from a number of square inches."""
    return square_meters(conversions.SQUARE_INCH * value)


def in_square_inches(area: Area) -> float:
    """Convert an area to a number of square inches."""
    return in_square_meters(area) / conversions.SQUARE_INCH


def square_feet(value: float) -> Area:
    """Construct an area from a number of square feet."""
    return square_meters(conversions.SQUARE_FOOT * value)


def in_square_feet(area: Area) -> float:
    """Convert an area to a number of square feet."""
    return in_square_meters(area) / conversions.SQUARE_FOOT


def square_yards(value: float) -> Area:
    """Construct an area from a number of square yards."""
    return square_meters(conversions.SQUARE_YARD * value)


def in_square_yards(area: Area) -> float:
    """Convert an area to a number of square yards."""
    return in_square_meters(area) / conversions.SQUARE_YARD


def acres(value: float) -> Area:
    """Construct an area from a number of acres."""
    return square_meters(conversions.ACRE * value)


def in_acres(area: Area) -> float:
    """Convert an area to a number of acres."""
    return in_square_meters(area) / conversions.ACRE


def square_miles(value: float) -> Area:
    """Construct an area from a number of square miles."""
    return square_meters(conversions.SQUARE_MILE * value)


def in_square_miles(area: Area) -> float:
    """Convert an area to a number of square miles."""
    return in_square_meters(area) / conversions.SQUARE_MILE


SQUARE_METER = square_meters(1.0)
SQUARE_MILLIMETER = square_millimeters(1.0)
SQUARE_CENTIMETER = square_centimeters(1.0)
HECTARE = hectares(1.0)
SQUARE_KILOMETER = square_kilometers(1.0)
SQUARE_INCH = square_inches(1.0)
SQUARE_FOOT = square_feet(1.0)
SQUARE_YARD = square_yards(1.0)
ACRE = acres(1.0)
SQUARE_MILE = square_miles(1.0)
