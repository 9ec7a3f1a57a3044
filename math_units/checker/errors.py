"""Module for creating errors representing invalid unit operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitCheckerError:
    """Represents a unit checking error.

    Attributes:
        code: Stable error code, e.g. ``U001``.
        lineno: Line of the offending expression.
        message: Human readable description with units rendered as dimensions.
        path: File the error was found in.
    """

    code: str
    lineno: int
    message: str
    path: str = ""

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return (
            "UnitCheckerError"
            f"(code={self.code!r}, lineno={self.lineno!r}, message={self.message!r})"
        )


def u001_error_factory(
    path: str, lineno: int, operator: str, left_unit: str, right_unit: str
) -> UnitCheckerError:
    """Factory for U001: Cannot combine operands with different units."""
    return UnitCheckerError(
        code="U001",
        lineno=lineno,
        message=(
            f"Cannot apply '{operator}' to operands with different units: "
            f"{left_unit} and {right_unit}"
        ),
        path=path,
    )


def u003_error_factory(
    path: str,
    lineno: int,
    arg_index: str,
    func_name: str,
    inferred_unit: str,
    expected_unit: str,
) -> UnitCheckerError:
    """Factory for U003: Argument to function has wrong unit."""
    return UnitCheckerError(
        code="U003",
        lineno=lineno,
        message=(
            f"Argument {arg_index} to function '{func_name}' "
            f"has unit {inferred_unit}, expected {expected_unit}"
        ),
        path=path,
    )


def u004_error_factory(
    path: str, lineno: int, returned_unit: str, return_unit: str
) -> UnitCheckerError:
    """Factory for U004: Unit of return value does not match function signature."""
    return UnitCheckerError(
        code="U004",
        lineno=lineno,
        message=(
            "Unit of return value does not match function "
            f"signature: returned {returned_unit}, "
            f"expected {return_unit}"
        ),
        path=path,
    )


def u005_error_factory(
    path: str, lineno: int, left_unit: str, right_unit: str
) -> UnitCheckerError:
    """Factory for U005: Cannot compare operands with different units."""
    return UnitCheckerError(
        code="U005",
        lineno=lineno,
        message=(
            f"Cannot compare operands with different units: "
            f"{left_unit} and {right_unit}"
        ),
        path=path,
    )


def u010_error_factory(
    path: str, lineno: int, expected_unit: str, inferred_unit: str
) -> UnitCheckerError:
    """Factory for U010: Incompatible unit in assignment."""
    return UnitCheckerError(
        code="U010",
        lineno=lineno,
        message=(
            f"Incompatible unit in assignment: expected {expected_unit}, "
            f"received {inferred_unit}"
        ),
        path=path,
    )


def u012_error_factory(path: str, lineno: int, detail: str) -> UnitCheckerError:
    """Factory for U012: Unit parameters cannot be reconciled."""
    return UnitCheckerError(
        code="U012",
        lineno=lineno,
        message=f"Unit parameters cannot be reconciled: {detail}",
        path=path,
    )
