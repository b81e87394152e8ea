"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, float64 coercion, object/string/complex rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_min_samples / check_n_columns: shape requirements
    - check_positive_int / check_index: integer arguments
"""

import numpy as np
import pytest

from litemath.core.exceptions import DimensionError, ValidationError
from litemath.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_index,
    check_min_samples,
    check_n_columns,
    check_ndim,
    check_positive_int,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.5, 2.5], dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "X")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="points"):
            check_array(["a"], "points")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_ndim
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "X")

    def test_counts_nan_and_inf(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf, 0.0]), "X")


class TestCheckNdim:

    def test_exact_ndim_passes(self):
        check_ndim(np.zeros((2, 2, 2)), 3, "X")

    def test_1d(self):
        check_1d(np.zeros(3), "x")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 1)), "x")

    def test_2d(self):
        check_2d(np.zeros((3, 1)), "X")
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(3), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape requirements
# ═══════════════════════════════════════════════════════════════════════


class TestShapeRequirements:

    def test_min_samples(self):
        check_min_samples(np.zeros((2, 3)), 2, "X")
        with pytest.raises(ValidationError, match="at least 3 samples, got 2"):
            check_min_samples(np.zeros((2, 3)), 3, "X")

    def test_n_columns(self):
        check_n_columns(np.zeros((5, 3)), 3, "X")
        with pytest.raises(DimensionError, match="expected 3 columns, got 2"):
            check_n_columns(np.zeros((5, 2)), 3, "X")


# ═══════════════════════════════════════════════════════════════════════
# Integer arguments
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositiveInt:

    def test_returns_plain_int(self):
        result = check_positive_int(np.int64(3), "rows")
        assert result == 3
        assert type(result) is int

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValidationError, match="must be >= 1"):
            check_positive_int(value, "rows")

    @pytest.mark.parametrize("value", [2.0, "3", True, None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError, match="positive integer"):
            check_positive_int(value, "rows")


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(0, 3, "row") == 0
        assert check_index(2, 3, "row") == 2

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range(self, index):
        with pytest.raises(ValidationError, match=r"out of range \[0, 3\)"):
            check_index(index, 3, "row")

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="integer index"):
            check_index(1.0, 3, "col")
