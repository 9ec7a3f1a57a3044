"""Static unit checking of client code through mypy."""

from .checker import UnitChecker, render_unit
from .errors import UnitCheckerError

__all__ = ["UnitChecker", "UnitCheckerError", "render_unit"]
