"""Elementwise helpers over sequences of numbers.

scale, shift and negate modify the sequence in place and return it.
dot_fma computes a dot product with fused multiply-add accumulation.
"""

from __future__ import annotations

import decimal
from collections.abc import MutableSequence, Sequence
from decimal import Decimal

import structlog

from fpmath.errors import LengthMismatchError

__all__ = [
    "DOT_PRODUCT_CONTEXT",
    "scale",
    "shift",
    "negate",
    "dot_fma",
]

logger = structlog.get_logger()

# 100 digits, far beyond the 17 of a double. Signals are not trapped so
# inf * 0 and inf - inf give NaN, as in IEEE float arithmetic.
DOT_PRODUCT_CONTEXT = decimal.Context(prec=100, traps=[])


def scale(values: MutableSequence, factor: float) -> MutableSequence:
    """Multiply every element by factor, in place."""
    for i, v in enumerate(values):
        values[i] = v * factor
    return values


def shift(values: MutableSequence, offset: float) -> MutableSequence:
    """Add offset to every element, in place."""
    for i, v in enumerate(values):
        values[i] = v + offset
    return values


def negate(values: MutableSequence) -> MutableSequence:
    """Flip the sign of every element, in place."""
    for i, v in enumerate(values):
        values[i] = -v
    return values


def _to_decimal(value: float) -> Decimal:
    # Decimal(int) and Decimal(float) are exact conversions
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(float(value))


def dot_fma(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Dot product sum(x * y) with fused multiply-add accumulation.

    Each step computes acc = x * y + acc with a single rounding, in a
    100-digit decimal context, and the total is rounded to a float once at
    the end. Cancellation between large terms does not lose the small ones:

        dot_fma([1e16, 1.0, -1e16], [1.0, 1.0, 1.0]) = 1.0

    Args:
        xs: First vector
        ys: Second vector, same length as xs

    Returns:
        The dot product (0.0 for empty vectors). NaN and infinities
        propagate as in float arithmetic.

    Raises:
        LengthMismatchError: If the vectors have different lengths
    """
    if len(xs) != len(ys):
        logger.warning("dot_fma_length_mismatch", len_xs=len(xs), len_ys=len(ys))
        raise LengthMismatchError(f"dot_fma requires equal lengths, got {len(xs)} and {len(ys)}")

    with decimal.localcontext(DOT_PRODUCT_CONTEXT):
        acc = Decimal(0)
        for x, y in zip(xs, ys):
            acc = _to_decimal(x).fma(_to_decimal(y), acc)
    return float(acc)
