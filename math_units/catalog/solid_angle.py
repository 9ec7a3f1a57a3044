"""Solid angles, stored in steradians."""

import math

from .. import quantity
from ..quantity import Quantity
from ..types import Angle, SolidAngle
from . import angle


def steradians(value: float) -> SolidAngle:
    """Construct a solid angle from a number of steradians."""
    return Quantity(value)


def in_steradians(solid_angle: SolidAngle) -> float:
    """Convert a solid angle to a number of steradians."""
    return solid_angle.unwrap()


def spats(value: float) -> SolidAngle:
    """Construct a solid angle from spats; one spat is a full sphere."""
    return steradians(4.0 * math.pi * value)


def in_spats(solid_angle: SolidAngle) -> float:
    """Convert a solid angle to a number of spats."""
    return in_steradians(solid_angle) / (4.0 * math.pi)


def square_degrees(value: float) -> SolidAngle:
    """Construct a solid angle from a number of square degrees."""
    return steradians(value * (math.pi / 180.0) ** 2)


def in_square_degrees(solid_angle: SolidAngle) -> float:
    """Convert a solid angle to a number of square degrees."""
    return in_steradians(solid_angle) / (math.pi / 180.0) ** 2


def conical(full_angle: Angle) -> SolidAngle:
    """The solid angle of a cone with the given full apex angle.

    Example:
        conical(angle.TWO_PI)  # a full sphere, 4 pi steradians
    """
    half_angle = quantity.half(full_angle)
    return steradians(2.0 * math.pi * (1.0 - angle.cos(half_angle)))


def pyramidal(theta: Angle, phi: Angle) -> SolidAngle:
    """The solid angle of a rectangular pyramid with the given apex angles.

    Args:
        theta: Full apex angle along one side of the base.
        phi: Full apex angle along the other side.
    """
    half_theta = quantity.half(theta)
    half_phi = quantity.half(phi)
    return steradians(
        4.0 * angle.in_radians(angle.asin(angle.sin(half_theta) * angle.sin(half_phi)))
    )
