"""Lengths, stored in meters.

Example:
    from math_units.catalog import length

    length.feet(3) == length.yards(1)  # True
    length.in_inches(length.centimeters(2.54))  # 1.0
"""

from ..quantity import Quantity
from ..types import Length
from . import conversions


def meters(value: float) -> Length:
    """Construct a length from a number of meters."""
    return Quantity(value)


def in_meters(length: Length) -> float:
    """Convert a length to a number of meters."""
    return length.unwrap()


def _unit(factor: float, value: float) -> Length:
    """Build a length from a value in a unit of factor meters."""
    return meters(factor * value)


def _in_unit(factor: float, length: Length) -> float:
    """Express a length in a unit of factor meters."""
    return in_meters(length) / factor


# Metric


def angstroms(value: float) -> Length:
    """Construct a length from a number of angstroms."""
    return _unit(conversions.ANGSTROM, value)


def in_angstroms(length: Length) -> float:
    """Convert a length to a number of angstroms."""
    return _in_unit(conversions.ANGSTROM, length)


def nanometers(value: float) -> Length:
    """Construct a length from a number of nanometers."""
    return _unit(conversions.NANOMETER, value)


def in_nanometers(length: Length) -> float:
    """Convert a length to a number of nanometers."""
    return _in_unit(conversions.NANOMETER, length)


def microns(value: float) -> Length:
    """Construct a length from a number of microns."""
    return _unit(conversions.MICRON, value)


def in_microns(length: Length) -> float:
    """Convert a length to a number of microns."""
    return _in_unit(conversions.MICRON, length)


def millimeters(value: float) -> Length:
    """Construct a length from a number of millimeters."""
    return _unit(conversions.MILLIMETER, value)


def in_millimeters(length: Length) -> float:
    """Convert a length to a number of millimeters."""
    return _in_unit(conversions.MILLIMETER, length)


def centimeters(value: float) -> Length:
    """Construct a length from a number of centimeters."""
    return _unit(conversions.CENTIMETER, value)


def in_centimeters(length: Length) -> float:
    """Convert a length to a number of centimeters."""
    return _in_unit(conversions.CENTIMETER, length)


def kilometers(value: float) -> Length:
    """Construct a length from a number of kilometers."""
    return _unit(conversions.KILOMETER, value)


def in_kilometers(length: Length) -> float:
    """Convert a length to a number of kilometers."""
    return _in_unit(conversions.KILOMETER, length)


# Imperial


def thou(value: float) -> Length:
    """Construct a length from thousandths of an inch."""
    return _unit(conversions.THOU, value)


def in_thou(length: Length) -> float:
    """Convert a length to a number of thou."""
    return _in_unit(conversions.THOU, length)


def inches(value: float) -> Length:
    """Construct a length from a number of inches."""
    return _unit(conversions.INCH, value)


def in_inches(length: Length) -> float:
    """Convert a length to a number of inches."""
    return _in_unit(conversions.INCH, length)


def feet(value: float) -> Length:
    """Construct a length from a number of feet."""
    return _unit(conversions.FOOT, value)


def in_feet(length: Length) -> float:
    """Convert a length to a number of feet."""
    return _in_unit(conversions.FOOT, length)


def yards(value: float) -> Length:
    """Construct a length from a number of yards."""
    return _unit(conversions.YARD, value)


def in_yards(length: Length) -> float:
    """Convert a length to a number of yards."""
    return _in_unit(conversions.YARD, length)


def miles(value: float) -> Length:
    """Construct a length from a number of miles."""
    return _unit(conversions.MILE, value)


def in_miles(length: Length) -> float:
    """Convert a length to a number of miles."""
    return _in_unit(conversions.MILE, length)


# Astronomical


def astronomical_units(value: float) -> Length:
    """Construct a length from a number of astronomical units."""
    return _unit(conversions.ASTRONOMICAL_UNIT, value)


def in_astronomical_units(length: Length) -> float:
    """Convert a length to a number of astronomical units."""
    return _in_unit(conversions.ASTRONOMICAL_UNIT, length)


def parsecs(value: float) -> Length:
    """Construct a length from a number of parsecs."""
    return _unit(conversions.PARSEC, value)


def in_parsecs(length: Length) -> float:
    """Convert a length to a number of parsecs."""
    return _in_unit(conversions.PARSEC, length)


def light_years(value: float) -> Length:
    """Construct a length from a number of light years."""
    return _unit(conversions.LIGHT_YEAR, value)


def in_light_years(length: Length) -> float:
    """Convert a length to a number of light years."""
    return _in_unit(conversions.LIGHT_YEAR, length)


# Digital


def css_pixels(value: float) -> Length:
    """Construct a length from CSS pixels, which are 1/96 of an inch."""
    return _unit(conversions.CSS_PIXEL, value)


def in_css_pixels(length: Length) -> float:
    """Convert a length to a number of CSS pixels."""
    return _in_unit(conversions.CSS_PIXEL, length)


def points(value: float) -> Length:
    """Construct a length from typographic points, which are 1/72 of an inch."""
    return _unit(conversions.POINT, value)


def in_points(length: Length) -> float:
    """Convert a length to a number of points."""
    return _in_unit(conversions.POINT, length)


def picas(value: float) -> Length:
    """Construct a length from a number of picas."""
    return _unit(conversions.PICA, value)


def in_picas(length: Length) -> float:
    """Convert a length to a number of picas."""
    return _in_unit(conversions.PICA, length)


# Constants

METER = meters(1.0)
NANOMETER = nanometers(1.0)
MICRON = microns(1.0)
MILLIMETER = millimeters(1.0)
CENTIMETER = centimeters(1.0)
KILOMETER = kilometers(1.0)
THOU = thou(1.0)
INCH = inches(1.0)
FOOT = feet(1.0)
YARD = yards(1.0)
MILE = miles(1.0)
ASTRONOMICAL_UNIT = astronomical_units(1.0)
PARSEC = parsecs(1.0)
LIGHT_YEAR = light_years(1.0)
CSS_PIXEL = css_pixels(1.0)
POINT = points(1.0)
PICA = picas(1.0)
