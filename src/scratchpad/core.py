"""Core logic for the Scratchpad application.

Quotients are computed in IEEE-754 double precision (Python ``float``).
"""

from __future__ import annotations

from scratchpad.models.io import ComparisonLine, ComparisonReport, DivisionResult
from scratchpad.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_Z = 10
DEFAULT_X = 10
DEFAULT_Y = 10


class DivisionByZeroError(ArithmeticError):
    """Raised when a division is attempted with a divisor of exactly zero."""

    def __init__(self, message: str | None = None) -> None:
        """Initialise the error with an optional message."""
        default_message = "division by zero is not allowed"
        super().__init__(message or default_message)


def safe_divide(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator``.

    Args:
        numerator: The dividend.
        denominator: The divisor. Zero (including ``-0.0``) is rejected.

    Returns:
        float: The quotient, in double precision.

    Raises:
        DivisionByZeroError: If ``denominator`` is zero.

    """
    if denominator == 0:
        raise DivisionByZeroError
    return float(numerator) / float(denominator)


def run_division(numerator: float, denominator: float) -> DivisionResult:
    """Divide two numbers and wrap the quotient in a :class:`DivisionResult`."""
    quotient = safe_divide(numerator, denominator)
    logger.debug(
        "Division computed",
        numerator=numerator,
        denominator=denominator,
        quotient=quotient,
    )
    return DivisionResult(
        numerator=numerator,
        denominator=denominator,
        quotient=quotient,
    )


def build_comparison_report(
    z: int = DEFAULT_Z,
    x: int = DEFAULT_X,
    y: int = DEFAULT_Y,
) -> ComparisonReport:
    """Evaluate the comparison operators between ``x``, ``y`` and ``z``."""
    lines = [
        ComparisonLine(expression="x == y", result=x == y),
        ComparisonLine(expression="x != y", result=x != y),
        ComparisonLine(expression="x > y", result=x > y),
        ComparisonLine(expression="x == z", result=x == z),
    ]
    return ComparisonReport(z=z, lines=lines)
