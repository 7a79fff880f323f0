"""Conversion of real numbers to float for the comparison helpers."""

from __future__ import annotations

import math


def to_float(value: float) -> float:
    """Convert a real number to float.

    Integers (and other reals) beyond the double range become infinities of
    the same sign instead of raising OverflowError.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
