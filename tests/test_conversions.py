import math
import random

import pytest

from math_units import catalog, rate
from math_units.catalog import (
    acceleration,
    angle,
    angular_speed,
    area,
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


@pytest.mark.parametrize(
    "first, second",
    [
        (length.inches(12), length.feet(1)),
        (length.feet(5280), length.miles(1)),
        (length.millimeters(25.4), length.inches(1)),
        (length.thou(1000), length.inches(1)),
        (length.points(72), length.inches(1)),
        (length.picas(6), length.inches(1)),
        (length.css_pixels(96), length.inches(1)),
        (length.kilometers(1), length.meters(1000)),
        (length.angstroms(10), length.nanometers(1)),
        (area.hectares(1), area.square_meters(10_000)),
        (area.square_feet(9), area.square_yards(1)),
        (volume.liters(1), volume.cubic_centimeters(1000)),
        (volume.milliliters(1), volume.cubic_centimeters(1)),
        (volume.us_liquid_gallons(1), volume.cubic_inches(231)),
        (volume.us_liquid_quarts(4), volume.us_liquid_gallons(1)),
        (volume.imperial_pints(8), volume.imperial_gallons(1)),
        (mass.grams(1000), mass.kilograms(1)),
        (mass.ounces(16), mass.pounds(1)),
        (mass.short_tons(1), mass.pounds(2000)),
        (mass.long_tons(1), mass.pounds(2240)),
        (duration.minutes(60), duration.hours(1)),
        (duration.hours(24), duration.days(1)),
        (duration.days(7), duration.weeks(1)),
        (duration.days(365.25), duration.julian_years(1)),
        (speed.kilometers_per_hour(3.6), speed.meters_per_second(1)),
        (speed.miles_per_hour(60), speed.feet_per_second(88)),
        (force.kips(1), force.pounds(1000)),
        (force.kilonewtons(1), force.newtons(1000)),
        (energy.kilojoules(3.6), energy.joules(3600)),
        (power.kilowatts(1), power.watts(1000)),
        (power.mechanical_horsepower(1), power.watts(745.69987158227022)),
        (pressure.kilopascals(101.325), pressure.atmospheres(1)),
        (density.grams_per_cubic_centimeter(1), density.kilograms_per_cubic_meter(1000)),
        (electrical.ampere_hours(1), electrical.coulombs(3600)),
        (electrical.microfarads(1000), electrical.farads(0.001)),
        (substance.millimoles(1000), substance.moles(1)),
        (substance.moles_per_liter(1), substance.moles_per_cubic_meter(1000)),
        (angular_speed.turns_per_minute(60), angular_speed.turns_per_second(1)),
        (angular_speed.turns_per_second(1), angular_speed.radians_per_second(2 * math.pi)),
        (acceleration.gees(1), acceleration.meters_per_second_squared(9.80665)),
        (light.foot_candles(1), light.lux(10.763910416709722)),
        (solid_angle.spats(1), solid_angle.steradians(4 * math.pi)),
        (percent.percent(50), percent.ratio(0.5)),
    ],
)
def test_equivalent_amounts(first, second):
    assert first == second


def test_accessors_convert_back():
    assert length.in_feet(length.yards(2)) == pytest.approx(6)
    assert duration.in_minutes(duration.hours(1.5)) == pytest.approx(90)
    assert mass.in_grams(mass.pounds(1)) == pytest.approx(453.59237)
    assert speed.in_kilometers_per_hour(speed.meters_per_second(10)) == pytest.approx(36)
    assert percent.in_percent(percent.ratio(0.25)) == pytest.approx(25)
    assert pixels.in_pixels(pixels.pixels(12)) == 12


def test_constants_are_one_unit():
    assert length.FOOT == length.feet(1)
    assert length.INCH * 12 == length.FOOT
    assert duration.HOUR == duration.minutes(60)


def test_pressure_from_force_per_area():
    psi = rate.per(area.square_inches(1), force.pounds(1))
    assert psi == pressure.pounds_per_square_inch(1)
    assert rate.at(psi, area.square_inches(2)) == force.pounds(2)


def test_pixel_resolution_as_rate():
    resolution = rate.per(length.inches(1), pixels.pixels(96))
    assert rate.at(resolution, length.inches(2)) == pixels.pixels(192)
    assert rate.at_(resolution, pixels.pixels(48)) == length.inches(0.5)


def test_conical_solid_angle():
    hemisphere = solid_angle.conical(angle.PI)
    assert hemisphere == solid_angle.steradians(2 * math.pi)


def test_pyramidal_solid_angle():
    # a cube face seen from its center subtends a sixth of the sphere
    face = solid_angle.pyramidal(angle.HALF_PI, angle.HALF_PI)
    assert solid_angle.in_steradians(face) == pytest.approx(4 * math.pi / 6)


def accessor_pairs():
    """Every ``(builder, in_builder)`` pair exported by the catalog modules."""
    pairs = []
    for module_name in catalog.__all__:
        module = getattr(catalog, module_name)
        for name in sorted(vars(module)):
            if name.startswith("in_") and callable(getattr(module, name[3:], None)):
                builder = getattr(module, name[3:])
                pairs.append(
                    pytest.param(builder, getattr(module, name), id=f"{module_name}.{name[3:]}")
                )
    return pairs


SEEDED = random.Random(77)
VALUES = [SEEDED.uniform(-1000, 1000) for _ in range(10)]


@pytest.mark.parametrize("builder, accessor", accessor_pairs())
def test_accessor_inverts_builder(builder, accessor):
    for value in VALUES:
        assert accessor(builder(value)) == pytest.approx(value, rel=1e-12, abs=1e-9)


def test_every_unit_family_has_accessor_pairs():
    families = {param.id.split(".")[0] for param in accessor_pairs()}
    assert families == set(catalog.__all__) - {"conversions"}


@pytest.mark.parametrize("value", VALUES)
def test_temperature_scales_convert_affinely(value):
    celsius = temperature.degrees_celsius(value)
    assert temperature.in_degrees_fahrenheit(celsius) == pytest.approx(value * 1.8 + 32)
    assert temperature.in_kelvins(celsius) == pytest.approx(value + 273.15)
    fahrenheit = temperature.degrees_fahrenheit(value)
    assert temperature.in_degrees_celsius(fahrenheit) == pytest.approx((value - 32) / 1.8)
    delta = temperature.celsius_degrees(value)
    assert temperature.in_fahrenheit_degrees(delta) == pytest.approx(value * 1.8)
