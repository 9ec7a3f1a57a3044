"""Units module."""

from .core import (
    BASE_UNITS,
    Amperes,
    Candelas,
    CelsiusDegrees,
    Coulombs,
    Cubed,
    CubicMeters,
    Farads,
    Henries,
    Joules,
    Kilograms,
    KilogramsPerCubicMeter,
    Lumens,
    Lux,
    Meters,
    MetersPerSecond,
    MetersPerSecondSquared,
    Moles,
    MolesPerCubicMeter,
    Newtons,
    Nits,
    Ohms,
    Pascals,
    Percentage,
    Pixel,
    PixelsPerSecond,
    PixelsPerSecondSquared,
    Product,
    Radians,
    RadiansPerSecond,
    RadiansPerSecondSquared,
    Rate,
    Seconds,
    Squared,
    SquareMeters,
    SquarePixels,
    Steradians,
    Unit,
    Unitless,
    Volts,
    Watts,
)
from .dimension import Dimension, dimension_of

__all__ = [
    "BASE_UNITS",
    "Amperes",
    "Candelas",
    "CelsiusDegrees",
    "Coulombs",
    "Cubed",
    "CubicMeters",
    "Dimension",
    "Farads",
    "Henries",
    "Joules",
    "Kilograms",
    "KilogramsPerCubicMeter",
    "Lumens",
    "Lux",
    "Meters",
    "MetersPerSecond",
    "MetersPerSecondSquared",
    "Moles",
    "MolesPerCubicMeter",
    "Newtons",
    "Nits",
    "Ohms",
    "Pascals",
    "Percentage",
    "Pixel",
    "PixelsPerSecond",
    "PixelsPerSecondSquared",
    "Product",
    "Radians",
    "RadiansPerSecond",
    "RadiansPerSecondSquared",
    "Rate",
    "Seconds",
    "Squared",
    "SquareMeters",
    "SquarePixels",
    "Steradians",
    "Unit",
    "Unitless",
    "Volts",
    "Watts",
    "dimension_of",
]
