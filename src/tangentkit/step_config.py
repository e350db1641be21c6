"""Configuration for the extrapolation step sequence.

This config controls how many offsets the driver visits and how each offset
``h`` is produced from the previous one.
"""

from __future__ import annotations

import math
import numbers

__all__ = [
    "DEFAULT_STEP_LIMIT",
    "DEFAULT_STEP_SIZE",
    "ACCUMULATION_STRATEGIES",
    "StepConfig",
]

DEFAULT_STEP_LIMIT = 1000
DEFAULT_STEP_SIZE = 0.001
ACCUMULATION_STRATEGIES = ("add", "multiply")


class StepConfig:
    """Configuration for the extrapolation step sequence.

    The driver visits the offsets ``h_0, ..., h_{step_limit - 1}`` with
    ``h_0 = 0.0``. How later offsets are formed is selected by
    ``accumulation``.
    """

    def __init__(
        self,
        step_limit: int = DEFAULT_STEP_LIMIT,
        step_size: float = DEFAULT_STEP_SIZE,
        accumulation: str = "add",
    ):
        """Initialize configuration.

        Args:
            step_limit:
                Number of offsets to evaluate. Must be a positive integer.

            step_size:
                Increment between consecutive offsets. Must be finite and
                strictly positive.

            accumulation:
                How offsets are generated.

                - ``"add"``: ``h_k = h_{k-1} + step_size``. Rounding error
                  accumulates from step to step.
                - ``"multiply"``: ``h_k = k * step_size``. Each offset is
                  rounded once.

        Raises:
            TypeError: If ``step_limit`` is not an integer.
            ValueError: If any value is out of range.
        """
        if isinstance(step_limit, bool) or not isinstance(step_limit, numbers.Integral):
            raise TypeError(f"step_limit must be an int; got {type(step_limit).__name__}.")
        if step_limit < 1:
            raise ValueError(f"step_limit must be positive; got {step_limit}.")

        step_size = float(step_size)
        if not math.isfinite(step_size) or step_size <= 0.0:
            raise ValueError(f"step_size must be finite and > 0; got {step_size}.")

        accumulation = str(accumulation).strip().lower()
        if accumulation not in ACCUMULATION_STRATEGIES:
            raise ValueError(
                f"accumulation must be one of {ACCUMULATION_STRATEGIES}; "
                f"got {accumulation!r}."
            )

        self.step_limit = int(step_limit)
        self.step_size = step_size
        self.accumulation = accumulation

    def __repr__(self) -> str:
        return (
            f"StepConfig(step_limit={self.step_limit}, "
            f"step_size={self.step_size}, accumulation={self.accumulation!r})"
        )
