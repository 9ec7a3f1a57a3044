"""Power, stored in watts.

Three horsepower definitions are provided: metric (75 kgf m/s), mechanical
(33000 ft lbf/min) and electrical (746 W).
"""

from ..quantity import Quantity
from ..types import Power
from . import conversions


def watts(value: float) -> Power:
    """Construct a power from a number of watts."""
    return Quantity(value)


def in_watts(power: Power) -> float:
    """Convert a power to a number of watts."""
    return power.unwrap()


def kilowatts(value: float) -> Power:
    """Construct a power from a number of kilowatts."""
    return watts(1000.0 * value)


def in_kilowatts(power: Power) -> float:
    """Convert a power to a number of kilowatts."""
    return in_watts(power) / 1000.0


def megawatts(value: float) -> Power:
    """Construct a power from a number of megawatts."""
    return watts(1.0e6 * value)


def in_megawatts(power: Power) -> float:
    """Convert a power to a number of megawatts."""
    return in_watts(power) / 1.0e6


def metric_horsepower(value: float) -> Power:
    """Construct a power from a number of metric horsepower."""
    return watts(conversions.METRIC_HORSEPOWER * value)


def in_metric_horsepower(power: Power) -> float:
    """Convert a power to a number of metric horsepower."""
    return in_watts(power) / conversions.METRIC_HORSEPOWER


def mechanical_horsepower(value: float) -> Power:
    """Construct a power from a number of mechanical horsepower."""
    return watts(conversions.MECHANICAL_HORSEPOWER * value)


def in_mechanical_horsepower(power: Power) -> float:
    """Convert a power to a number of mechanical horsepower."""
    return in_watts(power) / conversions.MECHANICAL_HORSEPOWER


def electrical_horsepower(value: float) -> Power:
    """Construct a power from a number of electrical horsepower."""
    return watts(conversions.ELECTRICAL_HORSEPOWER * value)


def in_electrical_horsepower(power: Power) -> float:
    """Convert a power to a number of electrical horsepower."""
    return in_watts(power) / conversions.ELECTRICAL_HORSEPOWER
