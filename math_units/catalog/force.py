"""Forces, stored in newtons."""

from ..quantity import Quantity
from ..types import Force
from . import conversions


def newtons(value: float) -> Force:
    """Construct a force from a number of newtons."""
    return Quantity(value)


def in_newtons(force: Force) -> float:
    """Convert a force to a number of newtons."""
    return force.unwrap()


def kilonewtons(value: float) -> Force:
    """Construct a force from a number of kilonewtons."""
    return newtons(1000.0 * value)


def in_kilonewtons(force: Force) -> float:
    """Convert a force to a number of kilonewtons."""
    return in_newtons(force) / 1000.0


def meganewtons(value: float) -> Force:
    """Construct a force from a number of meganewtons."""
    return newtons(1.0e6 * value)


def in_meganewtons(force: Force) -> float:
    """Convert a force to a number of meganewtons."""
    return in_newtons(force) / 1.0e6


def pounds(value: float) -> Force:
    """Construct a force from pounds-force."""
    return newtons(conversions.POUND_FORCE * value)


def in_pounds(force: Force) -> float:
    """Convert a force to a number of pounds."""
    return in_newtons(force) / conversions.POUND_FORCE


def kips(value: float) -> Force:
    """Construct a force from kips (thousands of pounds-force)."""
    return pounds(1000.0 * value)


def in_kips(force: Force) -> float:
    """Convert a force to a number of kips."""
    return in_pounds(force) / 1000.0


NEWTON = newtons(1.0)
POUND = pounds(1.0)
