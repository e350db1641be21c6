"""Tangent-line extrapolation of quadratic polynomials."""

from importlib.metadata import PackageNotFoundError, version

from tangentkit.driver import (
    ExtrapolationRow,
    iter_extrapolations,
    run_extrapolation,
    step_offsets,
    tabulate_extrapolation,
)
from tangentkit.extrapolation import extrapolate, tangent_error
from tangentkit.polynomial import evaluate_quadratic, evaluate_quadratic_derivative
from tangentkit.sink import ResultSink, format_row
from tangentkit.step_config import StepConfig

try:
    __version__ = version("tangentkit")
except PackageNotFoundError:
    pass

__all__ = [
    "ExtrapolationRow",
    "ResultSink",
    "StepConfig",
    "evaluate_quadratic",
    "evaluate_quadratic_derivative",
    "extrapolate",
    "format_row",
    "iter_extrapolations",
    "run_extrapolation",
    "step_offsets",
    "tabulate_extrapolation",
    "tangent_error",
]
