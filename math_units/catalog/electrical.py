"""Electrical quantities: charge, current, voltage, resistance, capacitance and
inductance, stored in coulombs, amperes, volts, ohms, farads and henries.
"""

from ..quantity import Quantity
from ..types import Capacitance, Charge, Current, Inductance, Resistance, Voltage
from . import conversions

# Charge


def coulombs(value: float) -> Charge:
    """Construct a charge from a number of coulombs."""
    return Quantity(value)


def in_coulombs(charge: Charge) -> float:
    """Convert a charge to a number of coulombs."""
    return charge.unwrap()


def ampere_hours(value: float) -> Charge:
    """Construct a charge from a number of ampere hours."""
    return coulombs(conversions.HOUR * value)


def in_ampere_hours(charge: Charge) -> float:
    """Convert a charge to a number of ampere hours."""
    return in_coulombs(charge) / conversions.HOUR


def milliampere_hours(value: float) -> Charge:
    """Construct a charge from a number of milliampere hours."""
    return coulombs(conversions.HOUR * value / 1000.0)


def in_milliampere_hours(charge: Charge) -> float:
    """Convert a charge to a number of milliampere hours."""
    return in_coulombs(charge) * 1000.0 / conversions.HOUR


# Current


def amperes(value: float) -> Current:
    """Construct a current from a number of amperes."""
    return Quantity(value)


def in_amperes(current: Current) -> float:
    """Convert a current to a number of amperes."""
    return current.unwrap()


def milliamperes(value: float) -> Current:
    """Construct a current from a number of milliamperes."""
    return amperes(value * 1.0e-3)


def in_milliamperes(current: Current) -> float:
    """Convert a current to a number of milliamperes."""
    return in_amperes(current) / 1.0e-3


# Voltage


def volts(value: float) -> Voltage:
    """Construct a voltage from a number of volts."""
    return Quantity(value)


def in_volts(voltage: Voltage) -> float:
    """Convert a voltage to a number of volts."""
    return voltage.unwrap()


# Resistance


def ohms(value: float) -> Resistance:
    """Construct a resistance from a number of ohms."""
    return Quantity(value)


def in_ohms(resistance: Resistance) -> float:
    """Convert a resistance to a number of ohms."""
    return resistance.unwrap()


# Capacitance


def farads(value: float) -> Capacitance:
    """Construct a capacitance from a number of farads."""
    return Quantity(value)


def in_farads(capacitance: Capacitance) -> float:
    """Convert a capacitance to a number of farads."""
    return capacitance.unwrap()


def microfarads(value: float) -> Capacitance:
    """Construct a capacitance from a number of microfarads."""
    return farads(value * 1.0e-6)


def in_microfarads(capacitance: Capacitance) -> float:
    """Convert a capacitance to a number of microfarads."""
    return in_farads(capacitance) / 1.0e-6


def nanofarads(value: float) -> Capacitance:
    """Construct a capacitance from a number of nanofarads."""
    return farads(value * 1.0e-9)


def in_nanofarads(capacitance: Capacitance) -> float:
    """Convert a capacitance to a number of nanofarads."""
    return in_farads(capacitance) / 1.0e-9


def picofarads(value: float) -> Capacitance:
    """Construct a capacitance from a number of picofarads."""
    return farads(value * 1.0e-12)


def in_picofarads(capacitance: Capacitance) -> float:
    """Convert a capacitance to a number of picofarads."""
    return in_farads(capacitance) / 1.0e-12


# Inductance


def henries(value: float) -> Inductance:
    """Construct an inductance from a number of henries."""
    return Quantity(value)


def in_henries(inductance: Inductance) -> float:
    """Convert an inductance to a number of henries."""
    return inductance.unwrap()


def millihenries(value: float) -> Inductance:
    """Construct an inductance from a number of millihenries."""
    return henries(value * 1.0e-3)


def in_millihenries(inductance: Inductance) -> float:
    """Convert an inductance to a number of millihenries."""
    return in_henries(inductance) / 1.0e-3


def microhenries(value: float) -> Inductance:
    """Construct an inductance from a number of microhenries."""
    return henries(value * 1.0e-6)


def in_microhenries(inductance: Inductance) -> float:
    """Convert an inductance to a number of microhenries."""
    return in_henries(inductance) / 1.0e-6


def nanohenries(value: float) -> Inductance:
    """Construct an inductance from a number of nanohenries."""
    return henries(value * 1.0e-9)


def in_nanohenries(inductance: Inductance) -> float:
    """Convert an inductance to a number of nanohenries."""
    return in_henries(inductance) / 1.0e-9


def kilohenries(value: float) -> Inductance:
    """Construct an inductance from a number of kilohenries."""
    return henries(value * 1.0e3)


def in_kilohenries(inductance: Inductance) -> float:
    """Convert an inductance to a number of kilohenries."""
    return in_henries(inductance) / 1.0e3
