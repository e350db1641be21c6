"""Validation and parsing of command-line values."""

from __future__ import annotations

import re

from tangentkit.logger import tangentkit_logger

__all__ = [
    "parse_real",
    "validate_leading_coefficient",
]

# Characters C's isspace() skips in the default locale.
_C_WHITESPACE = " \t\n\v\f\r"

# Longest decimal prefix accepted by C's strtod/atof, plus inf/nan spellings.
_REAL_PREFIX_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan
    )
    """,
    flags=re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def parse_real(text: str) -> float:
    """Converts ``text`` to a float the permissive way ``atof`` does.

    Leading ASCII whitespace is skipped and the longest leading decimal
    number is converted; anything after it is ignored. Only ASCII digits
    count, so non-ASCII numerals (e.g. Arabic-Indic digits) and text without
    a numeric prefix convert to ``0.0``. Both lossy cases are logged as
    warnings, since a malformed value is otherwise indistinguishable from
    zero.

    Args:
        text: Raw argument string.

    Returns:
        The parsed value.
    """
    stripped = text.lstrip(_C_WHITESPACE)
    match = _REAL_PREFIX_RE.match(stripped)
    if match is None:
        tangentkit_logger.warning("No number found in %r; using 0.0.", text)
        return 0.0
    if match.end() != len(stripped):
        tangentkit_logger.warning(
            "Ignoring trailing characters %r in %r.", stripped[match.end():], text
        )
    return float(match.group(0))


def validate_leading_coefficient(a: float) -> float:
    """Checks that the coefficient of ``x**2`` is non-zero.

    Args:
        a: Leading coefficient.

    Returns:
        ``a`` unchanged.

    Raises:
        ValueError: If ``a == 0.0``.
    """
    if a == 0.0:
        raise ValueError("a must not be zero!")
    return a
