"""Conversion factors from named units to canonical SI units.

Every value is the size of one named unit expressed in the canonical unit of its
family, e.g. ``FOOT`` is the number of meters in a foot.
"""

import math

METER = 1.0

# Length
ANGSTROM = 1.0e-10 * METER
NANOMETER = 1.0e-9 * METER
MICRON = 1.0e-6 * METER
MILLIMETER = 1.0e-3 * METER
CENTIMETER = 1.0e-2 * METER
KILOMETER = 1.0e3 * METER
INCH = 0.0254 * METER
FOOT = 12.0 * INCH
YARD = 3.0 * FOOT
THOU = 1.0e-3 * INCH
MILE = 5280.0 * FOOT
ASTRONOMICAL_UNIT = 149597870700.0 * METER
LIGHT_YEAR = 9460730472580800.0 * METER
PARSEC = (648000.0 / math.pi) * ASTRONOMICAL_UNIT
CSS_PIXEL = INCH / 96.0
POINT = INCH / 72.0
PICA = INCH / 6.0

# Area
SQUARE_INCH = INCH * INCH
SQUARE_FOOT = FOOT * FOOT
SQUARE_YARD = YARD * YARD
SQUARE_MILE = MILE * MILE
ACRE = 43560.0 * SQUARE_FOOT

# Volume
CUBIC_METER = METER * METER * METER
LITER = 0.001 * CUBIC_METER
IMPERIAL_GALLON = 4.54609 * LITER
IMPERIAL_QUART = IMPERIAL_GALLON / 4.0
IMPERIAL_PINT = IMPERIAL_QUART / 2.0
IMPERIAL_FLUID_OUNCE = IMPERIAL_PINT / 20.0
CUBIC_INCH = INCH * INCH * INCH
CUBIC_FOOT = FOOT * FOOT * FOOT
CUBIC_YARD = YARD * YARD * YARD
US_LIQUID_GALLON = 231.0 * CUBIC_INCH
US_LIQUID_QUART = US_LIQUID_GALLON / 4.0
US_LIQUID_PINT = US_LIQUID_QUART / 2.0
US_FLUID_OUNCE = US_LIQUID_PINT / 16.0
BUSHEL = 2150.42 * CUBIC_INCH
PECK = BUSHEL / 4.0
US_DRY_GALLON = PECK / 2.0
US_DRY_QUART = 67.200625 * CUBIC_INCH
US_DRY_PINT = US_DRY_QUART / 2.0

# Mass
KILOGRAM = 1.0
POUND = 0.45359237 * KILOGRAM
LONG_TON = 2240.0 * POUND
SHORT_TON = 2000.0 * POUND
OUNCE = POUND / 16.0

# Duration
SECOND = 1.0
MINUTE = 60.0 * SECOND
HOUR = 60.0 * MINUTE
DAY = 24.0 * HOUR
WEEK = 7.0 * DAY
JULIAN_YEAR = 365.25 * DAY

# Angle
RADIAN = 1.0
DEGREE = math.pi / 180.0
TURN = 2.0 * math.pi

# Substance
MOLE = 1.0

# Mechanics
GEE = 9.80665 * METER / (SECOND * SECOND)
NEWTON = KILOGRAM * METER / (SECOND * SECOND)
POUND_FORCE = 4.4482216152605 * NEWTON
WATT = NEWTON * METER / SECOND
ELECTRICAL_HORSEPOWER = 746.0 * WATT
MECHANICAL_HORSEPOWER = 33000.0 * FOOT * POUND_FORCE / MINUTE
METRIC_HORSEPOWER = 75.0 * KILOGRAM * GEE * METER / SECOND
PASCAL = NEWTON / (METER * METER)
ATMOSPHERE = 101325.0 * PASCAL
KILOWATT_HOUR = 3.6e6 * WATT * SECOND
