"""Volumes, stored in cubic meters.

US liquid, US dry and imperial measures are kept apart: a US liquid gallon, a US
dry gallon and an imperial gallon are three different volumes.
"""

from ..quantity import Quantity
from ..types import Volume
from . import conversions


def cubic_meters(value: float) -> Volume:
    """Construct a volume from a number of cubic meters."""
    return Quantity(value)


def in_cubic_meters(volume: Volume) -> float:
    """Convert a volume to a number of cubic meters."""
    return volume.unwrap()


def _unit(factor: float, value: float) -> Volume:
    """Build a volume from a value in a unit of factor cubic meters."""
    return cubic_meters(factor * value)


def _in_unit(factor: float, volume: Volume) -> float:
    """Express a volume in a unit of factor cubic meters."""
    return in_cubic_meters(volume) / factor


# Metric


def milliliters(value: float) -> Volume:
    """Construct a volume from a number of milliliters."""
    return cubic_meters(1.0e-6 * value)


def in_milliliters(volume: Volume) -> float:
    """Convert a volume to a number of milliliters."""
    return 1.0e6 * in_cubic_meters(volume)


def cubic_centimeters(value: float) -> Volume:
    """Construct a volume from a number of cubic centimeters."""
    return milliliters(value)


def in_cubic_centimeters(volume: Volume) -> float:
    """Convert a volume to a number of cubic centimeters."""
    return in_milliliters(volume)


def liters(value: float) -> Volume:
    """Construct a volume from a number of liters."""
    return cubic_meters(0.001 * value)


def in_liters(volume: Volume) -> float:
    """Convert a volume to a number of liters."""
    return 1000.0 * in_cubic_meters(volume)


# Imperial and US customary


def cubic_inches(value: float) -> Volume:
    """Construct a volume from a number of cubic inches."""
    return _unit(conversions.CUBIC_INCH, value)


def in_cubic_inches(volume: Volume) -> float:
    """Convert a volume to a number of cubic inches."""
    return _in_unit(conversions.CUBIC_INCH, volume)


def cubic_feet(value: float) -> Volume:
    """Construct a volume from a number of cubic feet."""
    return _unit(conversions.CUBIC_FOOT, value)


def in_cubic_feet(volume: Volume) -> float:
    """Convert a volume to a number of cubic feet."""
    return _in_unit(conversions.CUBIC_FOOT, volume)


def cubic_yards(value: float) -> Volume:
    """Construct a volume from a number of cubic yards."""
    return _unit(conversions.CUBIC_YARD, value)


def in_cubic_yards(volume: Volume) -> float:
    """Convert a volume to a number of cubic yards."""
    return _in_unit(conversions.CUBIC_YARD, volume)


def us_liquid_gallons(value: float) -> Volume:
    """Construct a volume from a number of US liquid gallons."""
    return _unit(conversions.US_LIQUID_GALLON, value)


def in_us_liquid_gallons(volume: Volume) -> float:
    """Convert a volume to a number of US liquid gallons."""
    return _in_unit(conversions.US_LIQUID_GALLON, volume)


def us_dry_gallons(value: float) -> Volume:
    """Construct a volume from a number of US dry gallons."""
    return _unit(conversions.US_DRY_GALLON, value)


def in_us_dry_gallons(volume: Volume) -> float:
    """Convert a volume to a number of US dry gallons."""
    return _in_unit(conversions.US_DRY_GALLON, volume)


def imperial_gallons(value: float) -> Volume:
    """Construct a volume from a number of imperial gallons."""
    return _unit(conversions.IMPERIAL_GALLON, value)


def in_imperial_gallons(volume: Volume) -> float:
    """Convert a volume to a number of imperial gallons."""
    return _in_unit(conversions.IMPERIAL_GALLON, volume)


def us_liquid_quarts(value: float) -> Volume:
    """Construct a volume from a number of US liquid quarts."""
    return _unit(conversions.US_LIQUID_QUART, value)


def in_us_liquid_quarts(volume: Volume) -> float:
    """Convert a volume to a number of US liquid quarts."""
    return _in_unit(conversions.US_LIQUID_QUART, volume)


def us_dry_quarts(value: float) -> Volume:
    """Construct a volume from a number of US dry quarts."""
    return _unit(conversions.US_DRY_QUART, value)


def in_us_dry_quarts(volume: Volume) -> float:
    """Convert a volume to a number of US dry quarts."""
    return _in_unit(conversions.US_DRY_QUART, volume)


def imperial_quarts(value: float) -> Volume:
    """Construct a volume from a number of imperial quarts."""
    return _unit(conversions.IMPERIAL_QUART, value)


def in_imperial_quarts(volume: Volume) -> float:
    """Convert a volume to a number of imperial quarts."""
    return _in_unit(conversions.IMPERIAL_QUART, volume)


def us_liquid_pints(value: float) -> Volume:
    """Construct a volume from a number of US liquid pints."""
    return _unit(conversions.US_LIQUID_PINT, value)


def in_us_liquid_pints(volume: Volume) -> float:
    """Convert a volume to a number of US liquid pints."""
    return _in_unit(conversions.US_LIQUID_PINT, volume)


def us_dry_pints(value: float) -> Volume:
    """Construct a volume from a number of US dry pints."""
    return _unit(conversions.US_DRY_PINT, value)


def in_us_dry_pints(volume: Volume) -> float:
    """Convert a volume to a number of US dry pints."""
    return _in_unit(conversions.US_DRY_PINT, volume)


def imperial_pints(value: float) -> Volume:
    """Construct a volume from a number of imperial pints."""
    return _unit(conversions.IMPERIAL_PINT, value)


def in_imperial_pints(volume: Volume) -> float:
    """Convert a volume to a number of imperial pints."""
    return _in_unit(conversions.IMPERIAL_PINT, volume)


def us_fluid_ounces(value: float) -> Volume:
    """Construct a volume from a number of US fluid ounces."""
    return _unit(conversions.US_FLUID_OUNCE, value)


def in_us_fluid_ounces(volume: Volume) -> float:
    """Convert a volume to a number of US fluid ounces."""
    return _in_unit(conversions.US_FLUID_OUNCE, volume)


def imperial_fluid_ounces(value: float) -> Volume:
    """Construct a volume from a number of imperial fluid ounces."""
    return _unit(conversions.IMPERIAL_FLUID_OUNCE, value)


def in_imperial_fluid_ounces(volume: Volume) -> float:
    """Convert a volume to a number of imperial fluid ounces."""
    return _in_unit(conversions.IMPERIAL_FLUID_OUNCE, volume)


CUBIC_METER = cubic_meters(1.0)
MILLILITER = milliliters(1.0)
CUBIC_CENTIMETER = cubic_centimeters(1.0)
LITER = liters(1.0)
CUBIC_INCH = cubic_inches(1.0)
CUBIC_FOOT = cubic_feet(1.0)
CUBIC_YARD = cubic_yards(1.0)
US_LIQUID_GALLON = us_liquid_gallons(1.0)
US_DRY_GALLON = us_dry_gallons(1.0)
IMPERIAL_GALLON = imperial_gallons(1.0)
US_LIQUID_QUART = us_liquid_quarts(1.0)
US_DRY_QUART = us_dry_quarts(1.0)
IMPERIAL_QUART = imperial_quarts(1.0)
US_LIQUID_PINT = us_liquid_pints(1.0)
US_DRY_PINT = us_dry_pints(1.0)
IMPERIAL_PINT = imperial_pints(1.0)
US_FLUID_OUNCE = us_fluid_ounces(1.0)
IMPERIAL_FLUID_OUNCE = imperial_fluid_ounces(1.0)
