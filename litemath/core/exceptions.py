"""
Exception hierarchy for litemath.

All exceptions inherit from LiteMathError to allow catching any
library-specific error. Shape errors form their own branch under
DimensionError so callers can catch every shape problem at once.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LiteMathError(Exception):
    """Base exception for all litemath errors."""
    pass


class ValidationError(LiteMathError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class SizeMismatchError(DimensionError):
    """
    Operands of an algebraic combination have incompatible shapes.

    Raised by products when inner dimensions disagree, and by scaled
    addition when the two shapes differ.

    Attributes:
        operation: Name of the operation that failed
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Raised by trace, determinant, characteristic polynomial and adjugate.

    Attributes:
        operation: Name of the operation that failed
        shape: (rows, cols) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class TooSmallError(DimensionError):
    """
    Matrix has too few rows or columns to drop one of each.

    Attributes:
        operation: Name of the operation that failed
        shape: (rows, cols) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class UnsupportedSizeError(LiteMathError, NotImplementedError):
    """
    Operation is not implemented for matrices of this size.

    Closed-form characteristic polynomials exist only up to 3x3. Also a
    NotImplementedError so generic callers can treat it as one.

    Attributes:
        operation: Name of the operation that failed
        size: Size of the square matrix that was passed
        max_size: Largest supported size
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        size: int | None = None,
        max_size: int | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.size = size
        self.max_size = max_size


class NumericalError(LiteMathError):
    """
    Numerical computation failed.

    Raised when an eigenvector cannot be recovered from a shifted
    covariance matrix, or similar numerical dead ends.
    """
    pass
