"""Densities, stored in kilograms per cubic meter."""

from ..quantity import Quantity
from ..types import Density
from . import conversions


def kilograms_per_cubic_meter(value: float) -> Density:
    """Construct a density from kilograms per cubic meter."""
    return Quantity(value)


def in_kilograms_per_cubic_meter(density: Density) -> float:
    """Convert a density to a number of kilograms per cubic meter."""
    return density.unwrap()


def grams_per_cubic_centimeter(value: float) -> Density:
    """Construct a density from a number of grams per cubic centimeter."""
    return kilograms_per_cubic_meter(1000.0 * value)


def in_grams_per_cubic_centimeter(density: Density) -> float:
    """Convert a density to a number of grams per cubic centimeter."""
    return in_kilograms_per_cubic_meter(density) / 1000.0


def pounds_per_cubic_inch(value: float) -> Density:
    """Construct a density from a number of pounds per cubic inch."""
    return kilograms_per_cubic_meter(conversions.POUND / conversions.CUBIC_INCH * value)


def in_pounds_per_cubic_inch(density: Density) -> float:
    """Convert a density to a number of pounds per cubic inch."""
    return in_kilograms_per_cubic_meter(density) / (
        conversions.POUND / conversions.CUBIC_INCH
    )


def pounds_per_cubic_foot(value: float) -> Density:
    """Construct a density from a number of pounds per cubic foot."""
    return kilograms_per_cubic_meter(conversions.POUND / conversions.CUBIC_FOOT * value)


def in_pounds_per_cubic_foot(density: Density) -> float:
    """Convert a density to a number of pounds per cubic foot."""
    return in_kilograms_per_cubic_meter(density) / (
        conversions.POUND / conversions.CUBIC_FOOT
    )
