"""Masses, stored in kilograms."""

from ..quantity import Quantity
from ..types import Mass
from . import conversions


def kilograms(value: float) -> Mass:
    """Construct a mass from a number of kilograms."""
    return Quantity(value)


def in_kilograms(mass: Mass) -> float:
    """Convert a mass to a number of kilograms."""
    return mass.unwrap()


def grams(value: float) -> Mass:
    """Construct a mass from a number of grams."""
    return kilograms(0.001 * value)


def in_grams(mass: Mass) -> float:
    """Convert a mass to a number of grams."""
    return 1000.0 * in_kilograms(mass)


def pounds(value: float) -> Mass:
    """Construct a mass from a number of pounds."""
    return kilograms(conversions.POUND * value)


def in_pounds(mass: Mass) -> float:
    """Convert a mass to a number of pounds."""
    return in_kilograms(mass) / conversions.POUND


def ounces(value: float) -> Mass:
    """Construct a mass from a number of ounces."""
    return kilograms(conversions.OUNCE * value)


def in_ounces(mass: Mass) -> float:
    """Convert a mass to a number of ounces."""
    return in_kilograms(mass) / conversions.OUNCE


def metric_tons(value: float) -> Mass:
    """Construct a mass from metric tons (tonnes) of 1000 kilograms."""
    return kilograms(1000.0 * value)


def in_metric_tons(mass: Mass) -> float:
    """Convert a mass to a number of metric tons."""
    return 0.001 * in_kilograms(mass)


def short_tons(value: float) -> Mass:
    """Construct a mass from short (US) tons of 2000 pounds."""
    return kilograms(conversions.SHORT_TON * value)


def in_short_tons(mass: Mass) -> float:
    """Convert a mass to a number of short tons."""
    return in_kilograms(mass) / conversions.SHORT_TON


def long_tons(value: float) -> Mass:
    """Construct a mass from long (imperial) tons of 2240 pounds."""
    return kilograms(conversions.LONG_TON * value)


def in_long_tons(mass: Mass) -> float:
    """Convert a mass to a number of long tons."""
    return in_kilograms(mass) / conversions.LONG_TON


KILOGRAM = kilograms(1.0)
GRAM = grams(1.0)
METRIC_TON = metric_tons(1.0)
POUND = pounds(1.0)
OUNCE = ounces(1.0)
LONG_TON = long_tons(1.0)
SHORT_TON = short_tons(1.0)
