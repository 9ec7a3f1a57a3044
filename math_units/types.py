"""Quantity type aliases for each family of units."""

from typing import TypeAlias

from .quantity import Quantity
from .units.core import (
    Amperes,
    Candelas,
    CelsiusDegrees,
    Coulombs,
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
    Radians,
    RadiansPerSecond,
    RadiansPerSecondSquared,
    Seconds,
    SquareMeters,
    Steradians,
    Unitless,
    Volts,
    Watts,
)

Float: TypeAlias = Quantity[Unitless]
Percent: TypeAlias = Quantity[Percentage]
Duration: TypeAlias = Quantity[Seconds]

Length: TypeAlias = Quantity[Meters]
Area: TypeAlias = Quantity[SquareMeters]
Volume: TypeAlias = Quantity[CubicMeters]
Pixels: TypeAlias = Quantity[Pixel]
Speed: TypeAlias = Quantity[MetersPerSecond]
Acceleration: TypeAlias = Quantity[MetersPerSecondSquared]

Angle: TypeAlias = Quantity[Radians]
AngularSpeed: TypeAlias = Quantity[RadiansPerSecond]
AngularAcceleration: TypeAlias = Quantity[RadiansPerSecondSquared]
SolidAngle: TypeAlias = Quantity[Steradians]

Mass: TypeAlias = Quantity[Kilograms]
Density: TypeAlias = Quantity[KilogramsPerCubicMeter]
Force: TypeAlias = Quantity[Newtons]
Energy: TypeAlias = Quantity[Joules]
Pressure: TypeAlias = Quantity[Pascals]

LuminousFlux: TypeAlias = Quantity[Lumens]
LuminousIntensity: TypeAlias = Quantity[Candelas]
Illuminance: TypeAlias = Quantity[Lux]
Luminance: TypeAlias = Quantity[Nits]

SubstanceAmount: TypeAlias = Quantity[Moles]
Molarity: TypeAlias = Quantity[MolesPerCubicMeter]

Charge: TypeAlias = Quantity[Coulombs]
Current: TypeAlias = Quantity[Amperes]
Capacitance: TypeAlias = Quantity[Farads]
Inductance: TypeAlias = Quantity[Henries]
Power: TypeAlias = Quantity[Watts]
Resistance: TypeAlias = Quantity[Ohms]
Voltage: TypeAlias = Quantity[Volts]

TemperatureDelta: TypeAlias = Quantity[CelsiusDegrees]
