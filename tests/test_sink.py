"""Tests for tangentkit.sink."""

import io

from tangentkit.sink import HEADER_LINES, ResultSink, format_row


def test_format_row_column_widths():
    """Tests that rows use widths 7, 19, 12 and 10 with three decimals."""
    line = format_row(2.999, 9.992002, 8.994001)
    assert line == "  2.999" + " " * 14 + "9.992" + " " * 7 + "8.994" + " " * 4 + "-0.998"
    assert len(line) == 7 + 19 + 12 + 10


def test_format_row_first_unit_parabola_row():
    """Tests the formatted first row of f(x) = x**2 around x = 2."""
    assert format_row(2.0, 4.0, 4.0) == "  2.000              4.000       4.000     0.000"


def test_format_row_error_is_exact_minus_approximation():
    """Tests that the last column is exact - approximation."""
    assert format_row(0.0, 1.0, 3.5).endswith("     2.500")
    assert format_row(0.0, 3.5, 1.0).endswith("    -2.500")


def test_header_written_once_before_first_row():
    """Tests that the header appears once, ahead of all rows."""
    out = io.StringIO()
    sink = ResultSink(out)
    assert not sink.header_written

    sink.write(2.0, 4.0, 4.0)
    sink.write(2.001, 4.004002, 4.004001)
    sink.write(2.002, 4.008008, 4.008004)

    lines = out.getvalue().splitlines()
    assert lines[:2] == list(HEADER_LINES)
    assert len(lines) == 5
    assert lines.count(HEADER_LINES[0]) == 1
    assert sink.header_written
    assert sink.rows_written == 3


def test_header_text():
    """Tests that the header lines match the column layout."""
    assert HEADER_LINES[0] == "  x + h      approximation    f(x + h)     error"
    assert HEADER_LINES[1] == "-" * 48


def test_separate_sinks_each_write_a_header():
    """Tests that header state belongs to the sink instance."""
    first, second = io.StringIO(), io.StringIO()
    ResultSink(first).write(0.0, 0.0, 0.0)
    ResultSink(second).write(0.0, 0.0, 0.0)
    assert first.getvalue() == second.getvalue()
    assert first.getvalue().startswith(HEADER_LINES[0])


def test_default_stream_is_stdout(capsys):
    """Tests that a sink without a stream writes to sys.stdout."""
    ResultSink().write(1.0, 1.0, 1.0)
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == format_row(1.0, 1.0, 1.0)
