"""Unit conversion catalog: builder and accessor functions for each unit family."""

from . import (
    acceleration,
    angle,
    angular_acceleration,
    angular_speed,
    area,
    conversions,
    density,
    duration,
    electrical,
    energy,
    force,
    length,
    light,
    mass,
    percent,
    pixels,
    power,
    pressure,
    solid_angle,
    speed,
    substance,
    temperature,
    volume,
)

__all__ = [
    "acceleration",
    "angle",
    "angular_acceleration",
    "angular_speed",
    "area",
    "conversions",
    "density",
    "duration",
    "electrical",
    "energy",
    "force",
    "length",
    "light",
    "mass",
    "percent",
    "pixels",
    "power",
    "pressure",
    "solid_angle",
    "speed",
    "substance",
    "temperature",
    "volume",
]
