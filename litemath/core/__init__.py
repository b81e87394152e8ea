"""
Core infrastructure for litemath.

Shared abstractions used by the matrix, roots, linalg and principal modules.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerances
"""

from litemath.core.protocols import Backend
from litemath.core.result import Result
from litemath.core.exceptions import (
    LiteMathError,
    ValidationError,
    DimensionError,
    SizeMismatchError,
    NotSquareError,
    TooSmallError,
    UnsupportedSizeError,
    NumericalError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "LiteMathError",
    "ValidationError",
    "DimensionError",
    "SizeMismatchError",
    "NotSquareError",
    "TooSmallError",
    "UnsupportedSizeError",
    "NumericalError",
]
