"""Utility functions for TangentKit package."""

from .numerics import observed_order, relative_error
from .validate import parse_real, validate_leading_coefficient

__all__ = [
    "observed_order",
    "relative_error",
    "parse_real",
    "validate_leading_coefficient",
]
