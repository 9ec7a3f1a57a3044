"""Photometric quantities.

Luminous flux is stored in lumens, luminous intensity in candelas (lumens per
steradian), illuminance in lux (lumens per square meter) and luminance in nits
(candelas per square meter).
"""

import math

from .. import rate
from ..quantity import Quantity
from ..types import Illuminance, Luminance, LuminousFlux, LuminousIntensity
from . import area


def lumens(value: float) -> LuminousFlux:
    """Construct a luminous flux from a number of lumens."""
    return Quantity(value)


def in_lumens(flux: LuminousFlux) -> float:
    """Convert a luminous flux to a number of lumens."""
    return flux.unwrap()


def candelas(value: float) -> LuminousIntensity:
    """Construct a luminous intensity from a number of candelas."""
    return Quantity(value)


def in_candelas(intensity: LuminousIntensity) -> float:
    """Convert a luminous intensity to a number of candelas."""
    return intensity.unwrap()


def lux(value: float) -> Illuminance:
    """Construct an illuminance from a number of lux."""
    return Quantity(value)


def in_lux(illuminance: Illuminance) -> float:
    """Convert an illuminance to a number of lux."""
    return illuminance.unwrap()


def foot_candles(value: float) -> Illuminance:
    """Construct an illuminance from foot-candles (lumens per square foot)."""
    return rate.per(area.square_feet(1.0), lumens(value))


def in_foot_candles(illuminance: Illuminance) -> float:
    """Convert an illuminance to a number of foot candles."""
    return in_lumens(rate.at(illuminance, area.square_feet(1.0)))


def nits(value: float) -> Luminance:
    """Construct a luminance from a number of nits."""
    return Quantity(value)


def in_nits(luminance: Luminance) -> float:
    """Convert a luminance to a number of nits."""
    return luminance.unwrap()


def foot_lamberts(value: float) -> Luminance:
    """Construct a luminance from foot-lamberts (1/pi candela per square foot)."""
    return rate.per(area.square_feet(math.pi), candelas(value))


def in_foot_lamberts(luminance: Luminance) -> float:
    """Convert a luminance to a number of foot lamberts."""
    return in_candelas(rate.at(luminance, area.square_feet(math.pi)))
