"""Tests for tangentkit.utils.validate."""

import logging
import math

import pytest

from tangentkit.utils.validate import parse_real, validate_leading_coefficient


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2", 2.0),
        ("-3.25", -3.25),
        ("+.5", 0.5),
        ("7.", 7.0),
        ("1e3", 1000.0),
        ("-2.5E-2", -0.025),
        ("  4.5", 4.5),
        ("inf", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_real_well_formed(text, expected):
    """Tests that ordinary numbers parse to their float value."""
    assert parse_real(text) == expected


def test_parse_real_nan():
    """Tests that nan spellings parse to nan."""
    assert math.isnan(parse_real("NaN"))


@pytest.mark.parametrize(
    "text, expected",
    [("12abc", 12.0), ("3.5.6", 3.5), ("1e", 1.0), ("-7 apples", -7.0)],
)
def test_parse_real_uses_numeric_prefix(text, expected, caplog):
    """Tests that trailing characters are dropped with a warning."""
    with caplog.at_level(logging.WARNING, logger="tangentkit"):
        assert parse_real(text) == expected
    assert "trailing" in caplog.text.lower()


@pytest.mark.parametrize("text", ["", "abc", ".", "-", "e5", "  "])
def test_parse_real_without_number_is_zero(text, caplog):
    """Tests that text without a numeric prefix parses as 0.0."""
    with caplog.at_level(logging.WARNING, logger="tangentkit"):
        assert parse_real(text) == 0.0
    assert "no number" in caplog.text.lower()


@pytest.mark.parametrize("a", [1.0, -1e-300, math.inf])
def test_validate_leading_coefficient_accepts_nonzero(a):
    """Tests that non-zero leading coefficients pass through."""
    assert validate_leading_coefficient(a) == a


@pytest.mark.parametrize("a", [0.0, -0.0])
def test_validate_leading_coefficient_rejects_zero(a):
    """Tests that a == 0 raises ValueError."""
    with pytest.raises(ValueError, match="a must not be zero"):
        validate_leading_coefficient(a)

@pytest.mark.parametrize("text", ["\u0663", "\u0661.5", "\uff17", "\u00a02"])
def test_parse_real_only_accepts_ascii_digits_and_whitespace(text, caplog):
    """Tests that non-ASCII digits and whitespace do not count as a number."""
    with caplog.at_level(logging.WARNING, logger="tangentkit"):
        assert parse_real(text) == 0.0
    assert "no number" in caplog.text.lower()


@pytest.mark.parametrize("text", ["\t3", "\n\v\f\r 3"])
def test_parse_real_skips_c_whitespace(text):
    """Tests that the whitespace atof skips is ignored."""
    assert parse_real(text) == 3.0
