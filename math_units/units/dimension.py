"""Runtime dimension algebra for unit tags.

This module provides:
- The Dimension class, representing a unit as a mapping of base symbols to
  exponents and supporting arithmetic.
- ``dimension_of``, which computes the dimension of a unit tag such as
  ``Rate[Meters, Seconds]``.

Dimensions are used to describe units in human readable form, e.g. in the errors
reported by the unit checker.

Example:
    from math_units.units import Meters, Rate, Seconds, dimension_of

    str(dimension_of(Rate[Meters, Seconds]))  # 'm.s^-1'
"""

import re
from typing import Any, Self, get_args, get_origin

from .core import BASE_UNITS, Product, Rate, Unit

# generic containers whose first type argument carries the unit
UNIT_CONTAINERS = frozenset(
    {"Quantity", "Interval", "Point2D", "Vector2D", "Axis2D", "Frame2D"}
)

_TOKEN_PATTERN = re.compile(r"\s*(?:([A-Za-z_][\w.]*)|(\[)|(\])|(,))")


class Dimension:
    """Represents a physical dimension as a mapping of base symbols to exponents."""

    def __init__(self, exponents: dict[str, int]):
        """Initialise dimension instance.

        Args:
            exponents: Mapping of unit symbols (like 'm', 's', 'kg') to their
                exponents. Zero exponents are removed.
        """
        self.exponents = {k: v for k, v in exponents.items() if v != 0}

    @property
    def is_dimensionless(self) -> bool:
        """Whether all exponents cancel out."""
        return not self.exponents

    def __mul__(self, other: "Dimension") -> "Dimension":
        """Multiply two dimensions."""
        symbols = set(self.exponents) | set(other.exponents)
        return Dimension(
            {
                symbol: self.exponents.get(symbol, 0) + other.exponents.get(symbol, 0)
                for symbol in symbols
            }
        )

    def __truediv__(self, other: "Dimension") -> "Dimension":
        """Divide two dimensions."""
        symbols = set(self.exponents) | set(other.exponents)
        return Dimension(
            {
                symbol: self.exponents.get(symbol, 0) - other.exponents.get(symbol, 0)
                for symbol in symbols
            }
        )

    def __pow__(self, power: int) -> "Dimension":
        """Raise the dimension to a power."""
        return Dimension({symbol: exp * power for symbol, exp in self.exponents.items()})

    def __eq__(self, other: object) -> bool:
        """Check equality of two Dimension instances."""
        if not isinstance(other, Dimension):
            return False
        return self.exponents == other.exponents

    def __hash__(self) -> int:
        """Hash the exponent mapping."""
        return hash(frozenset(self.exponents.items()))

    def __str__(self) -> str:
        """Return a string representation of the dimension."""
        if self.is_dimensionless:
            return "1"
        parts = []
        for symbol in sorted(self.exponents):  # sort for consistency
            exp = self.exponents[symbol]
            if exp == 1:
                parts.append(f"{symbol}")
            else:
                parts.append(f"{symbol}^{exp}")
        return ".".join(parts)

    def __repr__(self) -> str:
        """Return a detailed string representation of the dimension."""
        return f"Dimension({self.exponents})"

    @classmethod
    def from_string(cls, text: str) -> Self:
        """Parse a string like 'kg.m^2.s^-2' into a Dimension instance.

        - Multiplication: '.'
        - Powers: '^'
        - No division allowed.
        - '1' is the dimensionless value.

        Args:
            text: Representation of the dimension, e.g. 'kg.m^2.s^-2'.
        """
        if text.strip() == "1":
            return cls({})
        exponents: dict[str, int] = {}
        for part in text.split("."):
            match = re.fullmatch(r"([a-zA-Z]+)(?:\^(-?\d+))?", part)
            if not match:
                raise ValueError(f"Invalid dimension part: {part}")
            symbol = match.group(1)
            exp = int(match.group(2)) if match.group(2) else 1
            exponents[symbol] = exponents.get(symbol, 0) + exp
        if not exponents:
            raise ValueError(f"Invalid dimension string: {text}")
        return cls(exponents)

    @classmethod
    def from_type_expression(cls, text: str) -> Self:
        """Parse a rendered type such as 'Quantity[Rate[Meters, Seconds]]'.

        Args:
            text: Type as printed by a type checker. Module prefixes are ignored.

        Raises:
            ValueError: If the text is not a unit tag or a unit-carrying container.
        """
        tokens = _tokenize(text)
        dimension, position = _parse_type(tokens, 0)
        if position != len(tokens):
            raise ValueError(f"Unexpected trailing input in type: {text}")
        return cls(dimension.exponents)


def dimension_of(tag: Any) -> Dimension:
    """Return the dimension of a unit tag.

    Args:
        tag: A unit tag class (``Meters``) or a parametrised composite tag
            (``Rate[Meters, Seconds]``).

    Raises:
        ValueError: If ``tag`` is not a unit tag.
    """
    origin = get_origin(tag)
    if origin is Product:
        first, second = get_args(tag)
        return dimension_of(first) * dimension_of(second)
    if origin is Rate:
        dependent, independent = get_args(tag)
        return dimension_of(dependent) / dimension_of(independent)
    if isinstance(tag, type) and issubclass(tag, Unit) and tag not in (Product, Rate):
        return Dimension({tag.symbol: 1} if tag.symbol else {})
    raise ValueError(f"Not a unit tag: {tag!r}")


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    position = 0
    stripped = text.rstrip()
    while position < len(stripped):
        match = _TOKEN_PATTERN.match(stripped, position)
        if not match:
            raise ValueError(f"Invalid type expression: {text}")
        tokens.append(next(group for group in match.groups() if group))
        position = match.end()
    return tokens


def _parse_type(tokens: list[str], position: int) -> tuple[Dimension, int]:
    """Parse one type starting at ``position``; return it and the next position."""
    if position >= len(tokens) or tokens[position] in "[],":
        raise ValueError(f"Expected a type name in {' '.join(tokens)}")
    name = tokens[position].rsplit(".", 1)[-1]
    position += 1
    arguments: list[Dimension | None] = []
    if position < len(tokens) and tokens[position] == "[":
        position += 1
        while True:
            try:
                argument, position = _parse_type(tokens, position)
            except ValueError:
                # non-unit arguments such as coordinate tags
                argument, position = None, _skip_type(tokens, position)
            arguments.append(argument)
            if position >= len(tokens):
                raise ValueError(f"Unclosed '[' in {' '.join(tokens)}")
            if tokens[position] == "]":
                position += 1
                break
            if tokens[position] != ",":
                raise ValueError(f"Expected ',' in {' '.join(tokens)}")
            position += 1

    match name, arguments:
        case "Product", [Dimension() as first, Dimension() as second]:
            return first * second, position
        case "Rate", [Dimension() as dependent, Dimension() as independent]:
            return dependent / independent, position
        case container, [Dimension() as first, *_] if container in UNIT_CONTAINERS:
            return first, position
        case base, [] if base in BASE_UNITS:
            symbol = BASE_UNITS[base].symbol
            return Dimension({symbol: 1} if symbol else {}), position
    raise ValueError(f"Not a unit type: {name}")


def _skip_type(tokens: list[str], position: int) -> int:
    """Advance past one type argument without interpreting it."""
    depth = 0
    while position < len(tokens):
        match tokens[position]:
            case "[":
                depth += 1
            case "]" if depth == 0:
                return position
            case "]":
                depth -= 1
            case "," if depth == 0:
                return position
        position += 1
    return position
