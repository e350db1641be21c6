"""Tangent-line extrapolation of a quadratic."""

from __future__ import annotations

from tangentkit.polynomial import evaluate_quadratic, evaluate_quadratic_derivative
from tangentkit.utils.types import RealLike

__all__ = [
    "extrapolate",
    "tangent_error",
]


def extrapolate(a: float, b: float, c: float, x: float, h: RealLike) -> RealLike:
    """Approximates ``f(x + h)`` by adding a linear change to ``f(x)``.

    The slope used for the linear change is taken at the shifted point
    ``x + h`` rather than at ``x``:

        ``f(x) + h * f'(x + h)``

    With ``h == 0`` no correction is applied and the result is exactly
    ``f(x)``.

    Args:
        a: Coefficient of ``x**2``.
        b: Coefficient of ``x``.
        c: Constant term.
        x: Anchor point.
        h: Offset(s) from the anchor point.

    Returns:
        The extrapolated value(s), shaped like ``h``.
    """
    slope = evaluate_quadratic_derivative(a, b, x + h)
    change = h * slope
    return evaluate_quadratic(a, b, c, x) + change


def tangent_error(a: float, h: RealLike) -> RealLike:
    """Returns the exact error ``f(x + h) - extrapolate(a, b, c, x, h)``.

    Expanding both sides gives ``-a * h**2``, independent of ``b``, ``c``
    and ``x``. Tabulated errors match this up to rounding.

    Args:
        a: Coefficient of ``x**2``.
        h: Offset(s) from the anchor point.

    Returns:
        The signed error of the tangent-line approximation.
    """
    return -a * h * h
