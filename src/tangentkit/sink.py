"""Fixed-width text output of extrapolation results."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = [
    "HEADER_LINES",
    "format_row",
    "ResultSink",
]

HEADER_LINES = (
    "  x + h      approximation    f(x + h)     error",
    "------------------------------------------------",
)


def format_row(position: float, approximation: float, exact: float) -> str:
    """Formats one result row to line up with :data:`HEADER_LINES`.

    Columns are right-aligned with three decimals: position (width 7),
    approximation (width 19), exact value (width 12) and the error
    ``exact - approximation`` (width 10).
    """
    return "%7.3f%19.3f%12.3f%10.3f" % (
        position,
        approximation,
        exact,
        exact - approximation,
    )


class ResultSink:
    """Writes result rows to a text stream, preceded once by a header.

    The header is emitted before the first row this sink writes and never
    again for the lifetime of the sink.
    """

    def __init__(self, stream: TextIO | None = None):
        """Initialize the sink.

        Args:
            stream: Destination for the rows. ``None`` means ``sys.stdout``
                as it is at write time.
        """
        self._stream = stream
        self.header_written = False
        self.rows_written = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, position: float, approximation: float, exact: float) -> None:
        """Writes one row, emitting the header first if needed."""
        out = self.stream
        if not self.header_written:
            for line in HEADER_LINES:
                out.write(line + "\n")
            self.header_written = True
        out.write(format_row(position, approximation, exact) + "\n")
        self.rows_written += 1
