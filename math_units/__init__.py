"""Physical quantities with units checked statically by mypy.

Quantities carry their unit as a phantom type parameter, e.g. ``Quantity[Meters]``,
so mixing units is a type error while the runtime cost is a single float.

Example:
    from math_units import quantity
    from math_units.catalog import duration, length

    distance = length.feet(3)
    quantity.plus(length.yards(1), distance)  # length.feet(6)
    distance / duration.seconds(2)  # Quantity[Rate[Meters, Seconds]]
"""

from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version

from . import catalog, geometry, interval, precision, quantity, rate, types, units
from .catalog.temperature import Temperature
from .interval import Interval
from .quantity import Quantity

with suppress(PackageNotFoundError):
    __version__ = version("math-units")

__all__ = [
    "Interval",
    "Quantity",
    "Temperature",
    "catalog",
    "geometry",
    "interval",
    "precision",
    "quantity",
    "rate",
    "types",
    "units",
]
