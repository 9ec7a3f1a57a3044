"""Unit tags for static analysis.

Unit tags are classes that are never instantiated. They are used as the type
parameter of ``Quantity`` (e.g. ``Quantity[Meters]``) so that a static type checker
can reject arithmetic between incompatible units. Composite units are built with the
generic ``Product`` and ``Rate`` tags, e.g. ``Rate[Meters, Seconds]`` for a speed.
"""

from typing import ClassVar, Generic, TypeAlias, TypeVar


class Unit:
    """Base class for all unit tags."""

    symbol: ClassVar[str] = ""


A = TypeVar("A", bound=Unit)
B = TypeVar("B", bound=Unit)
U = TypeVar("U", bound=Unit)


# Base units


class Unitless(Unit):
    """Represents the absence of units; interchangeable with a plain float."""

    pass


class Meters(Unit):
    """Represents the meter unit."""

    symbol = "m"


class Seconds(Unit):
    """Represents the second unit."""

    symbol = "s"


class Kilograms(Unit):
    """Represents the kilogram unit."""

    symbol = "kg"


class Radians(Unit):
    """Represents the radian unit."""

    symbol = "rad"


class Steradians(Unit):
    """Represents the steradian unit."""

    symbol = "sr"


class Coulombs(Unit):
    """Represents the coulomb unit."""

    symbol = "C"


class Lumens(Unit):
    """Represents the lumen unit."""

    symbol = "lm"


class Moles(Unit):
    """Represents the mole unit."""

    symbol = "mol"


class Pixel(Unit):
    """Represents an on-screen pixel."""

    symbol = "px"


class CelsiusDegrees(Unit):
    """Represents a temperature difference of one degree Celsius (one kelvin)."""

    symbol = "K"


class Percentage(Unit):
    """Represents a fraction of a whole."""

    symbol = "pct"


BASE_UNITS: dict[str, type[Unit]] = {
    tag.__name__: tag
    for tag in (
        Unitless,
        Meters,
        Seconds,
        Kilograms,
        Radians,
        Steradians,
        Coulombs,
        Lumens,
        Moles,
        Pixel,
        CelsiusDegrees,
        Percentage,
    )
}


# Unit relations


class Product(Unit, Generic[A, B]):
    """The product of two units, e.g. ``Product[Newtons, Meters]`` for energy."""

    pass


class Rate(Unit, Generic[A, B]):
    """A dependent unit per an independent unit, e.g. ``Rate[Meters, Seconds]``."""

    pass


Squared: TypeAlias = Product[U, U]
Cubed: TypeAlias = Product[U, Product[U, U]]


# Unit aliases

RadiansPerSecond: TypeAlias = Rate[Radians, Seconds]
RadiansPerSecondSquared: TypeAlias = Rate[RadiansPerSecond, Seconds]

MetersPerSecond: TypeAlias = Rate[Meters, Seconds]
MetersPerSecondSquared: TypeAlias = Rate[MetersPerSecond, Seconds]
SquareMeters: TypeAlias = Squared[Meters]
CubicMeters: TypeAlias = Cubed[Meters]

Newtons: TypeAlias = Product[Kilograms, MetersPerSecondSquared]
Pascals: TypeAlias = Rate[Newtons, SquareMeters]
KilogramsPerCubicMeter: TypeAlias = Rate[Kilograms, CubicMeters]
Joules: TypeAlias = Product[Newtons, Meters]

Candelas: TypeAlias = Rate[Lumens, Steradians]
Lux: TypeAlias = Rate[Lumens, SquareMeters]
Nits: TypeAlias = Rate[Candelas, SquareMeters]

MolesPerCubicMeter: TypeAlias = Rate[Moles, CubicMeters]

Watts: TypeAlias = Rate[Joules, Seconds]
Amperes: TypeAlias = Rate[Coulombs, Seconds]
Volts: TypeAlias = Rate[Watts, Amperes]
Farads: TypeAlias = Rate[Coulombs, Volts]
Henries: TypeAlias = Rate[Volts, Rate[Amperes, Seconds]]
Ohms: TypeAlias = Rate[Volts, Amperes]

PixelsPerSecond: TypeAlias = Rate[Pixel, Seconds]
PixelsPerSecondSquared: TypeAlias = Rate[PixelsPerSecond, Seconds]
SquarePixels: TypeAlias = Squared[Pixel]
