"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

__all__ = [
    "relative_error",
    "observed_order",
]


def relative_error(value: ArrayLike, reference: ArrayLike, *, floor: float = 1e-300) -> float:
    """Returns ``max |value - reference| / max(|reference|, floor)``.

    Used to compare a computed quantity with a reference evaluation of the
    same expression, e.g. Horner's scheme against the expanded polynomial.
    ``floor`` keeps exact zeros of ``reference`` from dividing by zero.

    Args:
        value: Computed value(s).
        reference: Reference value(s), broadcastable against ``value``.
        floor: Smallest magnitude used in the denominator.

    Returns:
        The largest componentwise relative deviation.
    """
    value = np.asarray(value, dtype=float)
    reference = np.asarray(reference, dtype=float)
    scale = np.maximum(np.abs(reference), floor)
    return float(np.max(np.abs(value - reference) / scale))


def observed_order(steps: ArrayLike, errors: ArrayLike) -> float:
    """Estimates ``p`` in ``|error| ~ C * h**p`` from sampled errors.

    Fits a straight line to ``log|error|`` against ``log h`` by least
    squares and returns its slope. For the tangent-line extrapolation of a
    quadratic the result is close to 2.

    Args:
        steps: Positive step sizes ``h``.
        errors: Errors observed at those step sizes.

    Returns:
        The fitted order of convergence.

    Raises:
        ValueError: If fewer than two samples are given, shapes differ, or
            any step or error is zero or non-finite.
    """
    h = np.asarray(steps, dtype=float).ravel()
    err = np.abs(np.asarray(errors, dtype=float).ravel())
    if h.shape != err.shape:
        raise ValueError(f"steps and errors must have the same length; got {h.size} and {err.size}.")
    if h.size < 2:
        raise ValueError("observed_order requires at least two samples.")
    if not (np.all(np.isfinite(h)) and np.all(h > 0)):
        raise ValueError("steps must be finite and > 0.")
    if not (np.all(np.isfinite(err)) and np.all(err > 0)):
        raise ValueError("errors must be finite and non-zero.")

    slope, _ = np.polyfit(np.log(h), np.log(err), 1)
    return float(slope)
