"""
Tests for the litemath exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via LiteMathError)
    - Shape errors catchable via DimensionError and ValidationError
    - UnsupportedSizeError is also a NotImplementedError
    - Diagnostic attributes and their None defaults
"""

import pytest

from litemath.core.exceptions import (
    DimensionError,
    LiteMathError,
    NotSquareError,
    NumericalError,
    SizeMismatchError,
    TooSmallError,
    UnsupportedSizeError,
    ValidationError,
)
from litemath.matrix import DenseMatrix, identity


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via LiteMathError."""

    @pytest.mark.parametrize("exc_type", [
        SizeMismatchError, NotSquareError, TooSmallError,
    ])
    def test_shape_errors_are_dimension_errors(self, exc_type):
        with pytest.raises(DimensionError):
            raise exc_type("bad shape")

    @pytest.mark.parametrize("exc_type", [
        SizeMismatchError, NotSquareError, TooSmallError,
    ])
    def test_shape_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad shape")

    @pytest.mark.parametrize("exc_type", [
        ValidationError, DimensionError, SizeMismatchError, NotSquareError,
        TooSmallError, UnsupportedSizeError, NumericalError,
    ])
    def test_all_are_litemath_errors(self, exc_type):
        with pytest.raises(LiteMathError):
            raise exc_type("anything")

    def test_unsupported_size_is_not_implemented_error(self):
        with pytest.raises(NotImplementedError):
            raise UnsupportedSizeError("too big", size=4, max_size=3)

    def test_unsupported_size_is_not_validation_error(self):
        err = UnsupportedSizeError("too big")
        assert not isinstance(err, ValidationError)

    def test_numerical_error_is_not_validation_error(self):
        assert not isinstance(NumericalError("x"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSizeMismatchError:

    def test_all_attributes(self):
        err = SizeMismatchError(
            "multiply: inner dimensions differ",
            operation="multiply",
            left_shape=(2, 3),
            right_shape=(2, 3),
        )
        assert str(err) == "multiply: inner dimensions differ"
        assert err.operation == "multiply"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (2, 3)

    def test_defaults_are_none(self):
        err = SizeMismatchError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None

    def test_raised_by_multiply_with_shapes(self):
        a = DenseMatrix(2, 3)
        with pytest.raises(SizeMismatchError) as exc_info:
            a.multiply(DenseMatrix(2, 3))
        assert exc_info.value.operation == "multiply"
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (2, 3)


class TestNotSquareError:

    def test_defaults_are_none(self):
        err = NotSquareError("not square")
        assert err.operation is None
        assert err.shape is None

    def test_raised_by_trace_with_shape(self):
        with pytest.raises(NotSquareError) as exc_info:
            DenseMatrix(2, 3).trace()
        assert exc_info.value.operation == "trace"
        assert exc_info.value.shape == (2, 3)
        assert "(2, 3)" in str(exc_info.value)


class TestTooSmallError:

    def test_raised_by_minor_with_shape(self):
        with pytest.raises(TooSmallError) as exc_info:
            DenseMatrix(1, 4).minor(0, 0)
        assert exc_info.value.operation == "minor"
        assert exc_info.value.shape == (1, 4)


class TestUnsupportedSizeError:

    def test_all_attributes(self):
        err = UnsupportedSizeError(
            "too big", operation="characteristic_coefficients", size=5, max_size=3
        )
        assert err.operation == "characteristic_coefficients"
        assert err.size == 5
        assert err.max_size == 3

    def test_raised_by_characteristic_coefficients(self):
        with pytest.raises(UnsupportedSizeError) as exc_info:
            identity(4).characteristic_coefficients()
        assert exc_info.value.size == 4
        assert exc_info.value.max_size == 3
