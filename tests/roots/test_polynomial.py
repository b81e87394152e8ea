"""
Tests for polynomial evaluation, differentiation, deflation and
quadratic roots.
"""

import pytest

from litemath.core.exceptions import ValidationError
from litemath.roots import deflate, derivative, evaluate, quadratic_roots

# (x - 1)(x - 2)(x - 5), constant term first
CUBIC = [-10.0, 17.0, -8.0, 1.0]


class TestEvaluate:

    @pytest.mark.parametrize("x,expected", [(0.0, -10.0), (1.0, 0.0), (2.0, 0.0), (3.0, -4.0)])
    def test_cubic(self, x, expected):
        assert evaluate(CUBIC, x) == pytest.approx(expected)

    def test_empty_is_zero(self):
        assert evaluate([], 3.0) == 0.0


class TestDerivative:

    def test_cubic(self):
        assert derivative(CUBIC) == [17.0, -16.0, 3.0]

    def test_constant(self):
        assert derivative([4.0]) == [0.0]


class TestDeflate:

    def test_divides_out_root(self):
        assert deflate(CUBIC, 1.0) == [10.0, -7.0, 1.0]

    def test_quotient_roots(self):
        assert quadratic_roots(deflate(CUBIC, 5.0)) == pytest.approx((1.0, 2.0))

    def test_linear(self):
        # (2x - 6) / (x - 3) = 2
        assert deflate([-6.0, 2.0], 3.0) == [2.0]

    def test_needs_degree_one(self):
        with pytest.raises(ValidationError, match="deflate"):
            deflate([1.0], 0.0)


class TestQuadraticRoots:

    def test_two_roots_ascending(self):
        assert quadratic_roots([10.0, -7.0, 1.0]) == pytest.approx((2.0, 5.0))

    def test_negative_leading_coefficient(self):
        assert quadratic_roots([-10.0, 7.0, -1.0]) == pytest.approx((2.0, 5.0))

    def test_double_root(self):
        assert quadratic_roots([-0.25, 1.0, -1.0]) == (0.5, 0.5)

    def test_complex_roots(self):
        assert quadratic_roots([1.0, 0.0, 1.0]) == ()

    def test_linear_fallback(self):
        assert quadratic_roots([-3.0, 2.0, 0.0]) == (1.5,)
        assert quadratic_roots([-3.0, 2.0]) == (1.5,)

    def test_degenerate(self):
        with pytest.raises(ValidationError, match="no unique root"):
            quadratic_roots([1.0, 0.0, 0.0])

    def test_too_many_coefficients(self):
        with pytest.raises(ValidationError):
            quadratic_roots(CUBIC)
