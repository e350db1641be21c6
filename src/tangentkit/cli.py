"""Command-line entry point.

Invocation::

    tangentkit a b c x

where ``a``, ``b`` and ``c`` are the coefficients of
``f(x) = a*x**2 + b*x + c`` and ``x`` is the anchor point. The program prints
the tangent-line approximation and the exact value of ``f(x + h)`` for the
default step sequence.

Exit codes:
    0: success.
    1: wrong number of arguments.
    2: ``a`` is zero.
"""

from __future__ import annotations

import sys
from typing import Sequence

from tangentkit.driver import run_extrapolation
from tangentkit.logger import tangentkit_logger
from tangentkit.sink import ResultSink
from tangentkit.step_config import StepConfig
from tangentkit.utils.validate import parse_real, validate_leading_coefficient

__all__ = ["main"]

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_DOMAIN = 2

USAGE = (
    "Invocation: tangentkit a b c x\n"
    "   where a, b, and c are decimal values and a is not 0."
)


def main(argv: Sequence[str] | None = None) -> int:
    """Runs the program and returns its exit code.

    Args:
        argv: Arguments without the program name. Defaults to
            ``sys.argv[1:]``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        tangentkit_logger.debug("Expected 4 arguments, got %d.", len(args))
        print(USAGE)
        return EXIT_USAGE

    a, b, c, x = (parse_real(arg) for arg in args)
    try:
        validate_leading_coefficient(a)
    except ValueError as exc:
        print(exc)
        return EXIT_DOMAIN

    run_extrapolation(a, b, c, x, ResultSink(), StepConfig())
    return EXIT_OK
