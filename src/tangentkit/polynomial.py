"""Closed-form evaluation of a quadratic and its first derivative.

Both functions work elementwise, so ``t`` may be a Python float or a NumPy
array. Non-finite inputs propagate through the arithmetic unchanged.
"""

from __future__ import annotations

from tangentkit.utils.types import RealLike

__all__ = [
    "evaluate_quadratic",
    "evaluate_quadratic_derivative",
]


def evaluate_quadratic(a: float, b: float, c: float, t: RealLike) -> RealLike:
    """Evaluates ``f(t) = a*t**2 + b*t + c`` using Horner's scheme.

    The polynomial is folded as ``((a)*t + b)*t + c``, which costs two
    multiplications and two additions and avoids forming ``t**2``.

    Args:
        a: Coefficient of ``t**2``.
        b: Coefficient of ``t``.
        c: Constant term.
        t: Evaluation point(s).

    Returns:
        The polynomial value at ``t``, with the same shape as ``t``.
    """
    value = a
    value = value * t + b
    value = value * t + c
    return value


def evaluate_quadratic_derivative(a: float, b: float, t: RealLike) -> RealLike:
    """Evaluates ``f'(t) = 2*a*t + b`` for the quadratic ``a*t**2 + b*t + c``.

    Args:
        a: Coefficient of ``t**2``.
        b: Coefficient of ``t``.
        t: Evaluation point(s).

    Returns:
        The slope of the quadratic at ``t``.
    """
    slope = 2.0 * a
    slope = slope * t + b
    return slope
