"""Percentages, stored as a ratio where 1.0 is one hundred percent."""

from ..quantity import Quantity
from ..types import Percent


def ratio(value: float) -> Percent:
    """Construct a percentage from a ratio, e.g. 0.25 for 25%."""
    return Quantity(value)


def in_ratio(percentage: Percent) -> float:
    """Convert a percentage to a number of ratio."""
    return percentage.unwrap()


def percent(value: float) -> Percent:
    """Construct a percentage from a number of percent, e.g. 25 for 25%."""
    return ratio(value / 100.0)


def in_percent(percentage: Percent) -> float:
    """Convert a percentage to a number of percent."""
    return 100.0 * in_ratio(percentage)
