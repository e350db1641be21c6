"""Drives the extrapolation over a fixed sequence of offsets.

For each offset ``h`` the driver computes the tangent-line approximation of
``f(x + h)`` and the exact value, and hands both to a sink.

Examples:
    Tabulating the default 1000 steps for ``f(x) = x**2`` around ``x = 2``:

        >>> from tangentkit.driver import tabulate_extrapolation
        >>> table = tabulate_extrapolation(1.0, 0.0, 0.0, 2.0)
        >>> table["position"].shape
        (1000,)
        >>> float(table["exact"][0])
        4.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol

import numpy as np

from tangentkit.extrapolation import extrapolate
from tangentkit.logger import tangentkit_logger
from tangentkit.polynomial import evaluate_quadratic
from tangentkit.step_config import StepConfig
from tangentkit.utils.types import FloatArray

__all__ = [
    "ExtrapolationRow",
    "RowSink",
    "step_offsets",
    "iter_extrapolations",
    "run_extrapolation",
    "tabulate_extrapolation",
]


class RowSink(Protocol):
    """Anything that accepts one result row at a time."""

    def write(self, position: float, approximation: float, exact: float) -> None:
        """Consume one (position, approximation, exact) triple."""
        ...


@dataclass(frozen=True)
class ExtrapolationRow:
    """One step of the extrapolation loop."""

    position: float
    approximation: float
    exact: float

    @property
    def error(self) -> float:
        """Signed error ``exact - approximation``."""
        return self.exact - self.approximation


def step_offsets(config: StepConfig | None = None) -> FloatArray:
    """Builds the offsets ``h_k`` visited by the driver.

    Args:
        config: Step configuration. Defaults to :class:`StepConfig` defaults.

    Returns:
        1D float64 array of length ``config.step_limit`` starting at ``0.0``.
    """
    config = config or StepConfig()
    if config.accumulation == "multiply":
        return np.arange(config.step_limit, dtype=np.float64) * config.step_size

    offsets = np.empty(config.step_limit, dtype=np.float64)
    h = 0.0
    for k in range(config.step_limit):
        offsets[k] = h
        h = h + config.step_size
    return offsets


def iter_extrapolations(
    a: float,
    b: float,
    c: float,
    x: float,
    config: StepConfig | None = None,
) -> Iterator[ExtrapolationRow]:
    """Yields one :class:`ExtrapolationRow` per offset.

    Args:
        a: Coefficient of ``x**2``.
        b: Coefficient of ``x``.
        c: Constant term.
        x: Anchor point.
        config: Step configuration.

    Yields:
        Rows in order of increasing offset.
    """
    for h in step_offsets(config).tolist():
        approximation = extrapolate(a, b, c, x, h)
        exact = evaluate_quadratic(a, b, c, x + h)
        yield ExtrapolationRow(position=x + h, approximation=approximation, exact=exact)


def run_extrapolation(
    a: float,
    b: float,
    c: float,
    x: float,
    sink: RowSink,
    config: StepConfig | None = None,
) -> int:
    """Runs the extrapolation loop and forwards every row to ``sink``.

    Args:
        a: Coefficient of ``x**2``.
        b: Coefficient of ``x``.
        c: Constant term.
        x: Anchor point.
        sink: Receives ``(position, approximation, exact)`` once per step.
        config: Step configuration.

    Returns:
        Number of rows forwarded, always ``config.step_limit``.
    """
    config = config or StepConfig()
    tangentkit_logger.debug(
        "Extrapolating f(x) = %r*x^2 + %r*x + %r around x=%r with %r.",
        a, b, c, x, config,
    )
    count = 0
    for row in iter_extrapolations(a, b, c, x, config):
        sink.write(row.position, row.approximation, row.exact)
        count += 1
    tangentkit_logger.debug("Wrote %d extrapolation rows.", count)
    return count


def tabulate_extrapolation(
    a: float,
    b: float,
    c: float,
    x: float,
    config: StepConfig | None = None,
) -> dict[str, FloatArray]:
    """Returns the whole extrapolation table as NumPy arrays.

    Values are bitwise identical to those produced by
    :func:`iter_extrapolations` for the same inputs.

    Args:
        a: Coefficient of ``x**2``.
        b: Coefficient of ``x``.
        c: Constant term.
        x: Anchor point.
        config: Step configuration.

    Returns:
        Dict with 1D arrays ``position``, ``approximation``, ``exact`` and
        ``error``.
    """
    h = step_offsets(config)
    position = x + h
    approximation = extrapolate(a, b, c, x, h)
    exact = evaluate_quadratic(a, b, c, position)
    return {
        "position": np.asarray(position, dtype=np.float64),
        "approximation": np.asarray(approximation, dtype=np.float64),
        "exact": np.asarray(exact, dtype=np.float64),
        "error": np.asarray(exact - approximation, dtype=np.float64),
    }
