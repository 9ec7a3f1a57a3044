"""Energies, stored in joules."""

from ..quantity import Quantity
from ..types import Energy
from . import conversions


def joules(value: float) -> Energy:
    """Construct an energy from a number of joules."""
    return Quantity(value)


def in_joules(energy: Energy) -> float:
    """Convert an energy to a number of joules."""
    return energy.unwrap()


def kilojoules(value: float) -> Energy:
    """Construct an energy from a number of kilojoules."""
    return joules(1000.0 * value)


def in_kilojoules(energy: Energy) -> float:
    """Convert an energy to a number of kilojoules."""
    return in_joules(energy) / 1000.0


def megajoules(value: float) -> Energy:
    """Construct an energy from a number of megajoules."""
    return joules(1.0e6 * value)


def in_megajoules(energy: Energy) -> float:
    """Convert an energy to a number of megajoules."""
    return in_joules(energy) / 1.0e6


def kilowatt_hours(value: float) -> Energy:
    """Construct an energy from a number of kilowatt hours."""
    return joules(conversions.KILOWATT_HOUR * value)


def in_kilowatt_hours(energy: Energy) -> float:
    """Convert an energy to a number of kilowatt hours."""
    return in_joules(energy) / conversions.KILOWATT_HOUR
