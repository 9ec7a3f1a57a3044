"""Rates of change between quantities.

A ``Quantity[Rate[A, B]]`` is an amount of ``A`` per unit of ``B``, stored as the
dependent value divided by the independent value in canonical units. Speeds,
pressures, currents and many other derived quantities are rates.

Rates only compose when they share a unit: ``rate_product`` turns ``A`` per ``B`` and
``B`` per ``C`` into ``A`` per ``C``, and any other combination is a static type
error.

Example:
    from math_units import rate
    from math_units.catalog import duration, length

    speed = rate.rate(length.meters(10), duration.seconds(2))
    rate.at(speed, duration.seconds(4))  # 20 meters
"""

from typing import TypeVar

from .quantity import Quantity, ieee_divide
from .units.core import A, B, Rate, Unit

C = TypeVar("C", bound=Unit)


def rate(dependent: Quantity[A], independent: Quantity[B]) -> Quantity[Rate[A, B]]:
    """The rate of change of a dependent quantity per an independent one.

    Example:
        rate(length.meters(10), duration.seconds(2))  # 5 m/s
    """
    return Quantity(ieee_divide(dependent.unwrap(), independent.unwrap()))


def per(independent: Quantity[B], dependent: Quantity[A]) -> Quantity[Rate[A, B]]:
    """``rate`` with the arguments flipped."""
    return Quantity(ieee_divide(dependent.unwrap(), independent.unwrap()))


def at(rate_of_change: Quantity[Rate[A, B]], independent: Quantity[B]) -> Quantity[A]:
    """Multiply a rate by an amount of its independent unit.

    Example:
        at(speed.kilometers_per_hour(100), duration.minutes(30))  # 50 km
    """
    return Quantity(rate_of_change.unwrap() * independent.unwrap())


def at_(rate_of_change: Quantity[Rate[A, B]], dependent: Quantity[A]) -> Quantity[B]:
    """The amount of the independent unit needed to reach a dependent amount."""
    return Quantity(ieee_divide(dependent.unwrap(), rate_of_change.unwrap()))


def for_(independent: Quantity[B], rate_of_change: Quantity[Rate[A, B]]) -> Quantity[A]:
    """``at`` with the arguments flipped."""
    return Quantity(rate_of_change.unwrap() * independent.unwrap())


def inverse(rate_of_change: Quantity[Rate[A, B]]) -> Quantity[Rate[B, A]]:
    """Flip a rate: meters per second becomes seconds per meter."""
    return Quantity(ieee_divide(1.0, rate_of_change.unwrap()))


def rate_product(
    first: Quantity[Rate[A, B]], second: Quantity[Rate[B, C]]
) -> Quantity[Rate[A, C]]:
    """Multiply two rates that share a unit, cancelling it out.

    A rate of ``A`` per ``B`` times a rate of ``B`` per ``C`` is a rate of ``A``
    per ``C``. Rates without a shared unit are rejected by the type checker.
    """
    return Quantity(first.unwrap() * second.unwrap())
