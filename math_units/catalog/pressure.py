"""Pressures, stored in pascals."""

from .. import rate
from ..quantity import Quantity
from ..types import Pressure
from . import area, conversions, force


def pascals(value: float) -> Pressure:
    """Construct a pressure from a number of pascals."""
    return Quantity(value)


def in_pascals(pressure: Pressure) -> float:
    """Convert a pressure to a number of pascals."""
    return pressure.unwrap()


def kilopascals(value: float) -> Pressure:
    """Construct a pressure from a number of kilopascals."""
    return pascals(1000.0 * value)


def in_kilopascals(pressure: Pressure) -> float:
    """Convert a pressure to a number of kilopascals."""
    return in_pascals(pressure) / 1000.0


def megapascals(value: float) -> Pressure:
    """Construct a pressure from a number of megapascals."""
    return pascals(1.0e6 * value)


def in_megapascals(pressure: Pressure) -> float:
    """Convert a pressure to a number of megapascals."""
    return in_pascals(pressure) / 1.0e6


def pounds_per_square_inch(value: float) -> Pressure:
    """Construct a pressure from pounds-force per square inch (psi)."""
    return rate.per(area.square_inches(1.0), force.pounds(value))


def in_pounds_per_square_inch(pressure: Pressure) -> float:
    """Convert a pressure to a number of pounds per square inch."""
    return force.in_pounds(rate.at(pressure, area.square_inches(1.0)))


def atmospheres(value: float) -> Pressure:
    """Construct a pressure from a number of atmospheres."""
    return pascals(conversions.ATMOSPHERE * value)


def in_atmospheres(pressure: Pressure) -> float:
    """Convert a pressure to a number of atmospheres."""
    return in_pascals(pressure) / conversions.ATMOSPHERE
