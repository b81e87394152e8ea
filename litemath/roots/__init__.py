"""
Polynomial root utilities.

Public API:
    smallest_nonnegative_real_root(c) - 30-step bisection for a real-rooted cubic
    quadratic_roots(c)                - real roots of a quadratic, ascending
    deflate(c, r)                     - divide out (x - r)
    evaluate(c, x), derivative(c)     - Horner evaluation, differentiation

Coefficients are always ordered constant term first.
"""

from litemath.roots._cubic import BISECTION_ITERATIONS, smallest_nonnegative_real_root
from litemath.roots._polynomial import deflate, derivative, evaluate, quadratic_roots

__all__ = [
    "BISECTION_ITERATIONS",
    "smallest_nonnegative_real_root",
    "quadratic_roots",
    "deflate",
    "derivative",
    "evaluate",
]
