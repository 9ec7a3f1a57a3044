"""Amounts of substance, stored in moles, and molar concentrations, stored in
moles per cubic meter.
"""

from ..quantity import Quantity
from ..types import Molarity, SubstanceAmount
from . import conversions

ONE_MOLE_PER_LITER = conversions.MOLE / conversions.LITER
ONE_DECIMOLE_PER_LITER = 0.1 * conversions.MOLE / conversions.LITER


def moles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of moles."""
    return Quantity(value)


def in_moles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of moles."""
    return amount.unwrap()


def picomoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of picomoles."""
    return moles(value * 1.0e-12)


def in_picomoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of picomoles."""
    return in_moles(amount) / 1.0e-12


def nanomoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of nanomoles."""
    return moles(value * 1.0e-9)


def in_nanomoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of nanomoles."""
    return in_moles(amount) / 1.0e-9


def micromoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of micromoles."""
    return moles(value * 1.0e-6)


def in_micromoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of micromoles."""
    return in_moles(amount) / 1.0e-6


def millimoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of millimoles."""
    return moles(value * 1.0e-3)


def in_millimoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of millimoles."""
    return in_moles(amount) / 1.0e-3


def centimoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of centimoles."""
    return moles(value * 1.0e-2)


def in_centimoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of centimoles."""
    return in_moles(amount) / 1.0e-2


def decimoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of decimoles."""
    return moles(value * 1.0e-1)


def in_decimoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of decimoles."""
    return in_moles(amount) / 1.0e-1


def kilomoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of kilomoles."""
    return moles(value * 1.0e3)


def in_kilomoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of kilomoles."""
    return in_moles(amount) / 1.0e3


def megamoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of megamoles."""
    return moles(value * 1.0e6)


def in_megamoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of megamoles."""
    return in_moles(amount) / 1.0e6


def gigamoles(value: float) -> SubstanceAmount:
    """Construct an amount of substance from a number of gigamoles."""
    return moles(value * 1.0e9)


def in_gigamoles(amount: SubstanceAmount) -> float:
    """Convert an amount of substance to a number of gigamoles."""
    return in_moles(amount) / 1.0e9


# Molarity


def moles_per_cubic_meter(value: float) -> Molarity:
    """Construct a concentration from moles per cubic meter."""
    return Quantity(value)


def in_moles_per_cubic_meter(molarity: Molarity) -> float:
    """Convert a concentration to a number of moles per cubic meter."""
    return molarity.unwrap()


def moles_per_liter(value: float) -> Molarity:
    """Construct a concentration from a number of moles per liter."""
    return moles_per_cubic_meter(value * ONE_MOLE_PER_LITER)


def in_moles_per_liter(molarity: Molarity) -> float:
    """Convert a concentration to a number of moles per liter."""
    return in_moles_per_cubic_meter(molarity) / ONE_MOLE_PER_LITER


def decimoles_per_liter(value: float) -> Molarity:
    """Construct a concentration from a number of decimoles per liter."""
    return moles_per_cubic_meter(value * ONE_DECIMOLE_PER_LITER)


def in_decimoles_per_liter(molarity: Molarity) -> float:
    """Convert a concentration to a number of decimoles per liter."""
    return in_moles_per_cubic_meter(molarity) / ONE_DECIMOLE_PER_LITER


def centimoles_per_liter(value: float) -> Molarity:
    """Construct a concentration from a number of centimoles per liter."""
    return decimoles_per_liter(10.0 * value)


def in_centimoles_per_liter(molarity: Molarity) -> float:
    """Convert a concentration to a number of centimoles per liter."""
    return in_decimoles_per_liter(molarity) / 10.0


def millimoles_per_liter(value: float) -> Molarity:
    """Construct a concentration from a number of millimoles per liter."""
    return decimoles_per_liter(100.0 * value)


def in_millimoles_per_liter(molarity: Molarity) -> float:
    """Convert a concentration to a number of millimoles per liter."""
    return in_decimoles_per_liter(molarity) / 100.0


def micromoles_per_liter(value: float) -> Molarity:
    """Construct a concentration from a number of micromoles per liter."""
    return decimoles_per_liter(1000.0 * value)


def in_micromoles_per_liter(molarity: Molarity) -> float:
    """Convert a concentration to a number of micromoles per liter."""
    return in_decimoles_per_liter(molarity) / 1000.0
