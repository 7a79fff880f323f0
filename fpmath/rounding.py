"""Rounding helpers: banker's rounding and base-10 decomposition.

- round_half_even: IEEE roundTiesToEven to a (saturated) 64-bit integer
- frexp10: x = mantissa * 10**exponent with 0.1 <= |mantissa| < 1
- round_n: round to n significant decimal digits
"""

from __future__ import annotations

import math
from decimal import Context, Decimal
from numbers import Integral

import structlog

from fpmath.coercion import to_float
from fpmath.constants import INT64_MAX, INT64_MIN
from fpmath.errors import InvalidArgumentError

__all__ = [
    "round_half_even",
    "frexp10",
    "round_n",
]

logger = structlog.get_logger()

# Largest power of ten applied in a single step. 10**300 is finite, and
# splitting larger shifts keeps subnormal and near-DBL_MAX inputs in range.
_MAX_POW10_STEP = 300

# A double carries at most 17 significant decimal digits
_MAX_SIGNIFICANT_DIGITS = 17

# Wide enough for the full decimal expansion of any double (at most 767
# significant digits), so shifting its exponent never rounds
EXACT_DECIMAL_CONTEXT = Context(prec=800)


def round_half_even(x: float) -> int:
    """Round to the nearest integer, ties to even.

    Overflow policy is saturation: values beyond the 64-bit signed range
    (and the infinities) clamp to INT64_MIN / INT64_MAX, NaN maps to 0.

    Examples:
        round_half_even(0.5) = 0
        round_half_even(1.5) = 2
        round_half_even(-2.5) = -2
    """
    if isinstance(x, Integral):
        result = max(INT64_MIN, min(int(x), INT64_MAX))
        if result != x:
            logger.warning("round_saturated", value=x, result=result, reason="overflow")
        return result
    x = to_float(x)
    if math.isnan(x):
        logger.warning("round_saturated", value=x, result=0, reason="nan")
        return 0
    if math.isinf(x):
        result = INT64_MAX if x > 0 else INT64_MIN
        logger.warning("round_saturated", value=x, result=result, reason="infinite")
        return result

    # round() on a float is exact and uses ties-to-even
    nearest = round(x)
    if nearest > INT64_MAX:
        logger.warning("round_saturated", value=x, result=INT64_MAX, reason="overflow")
        return INT64_MAX
    if nearest < INT64_MIN:
        logger.warning("round_saturated", value=x, result=INT64_MIN, reason="overflow")
        return INT64_MIN
    return nearest


def _scale_pow10(x: float, n: int) -> float:
    """x * 10**n without overflowing the intermediate power.

    Negative powers divide by the exact positive power, which rounds once
    for |n| <= 22.
    """
    while n > _MAX_POW10_STEP:
        x *= 10.0**_MAX_POW10_STEP
        n -= _MAX_POW10_STEP
    while n < -_MAX_POW10_STEP:
        x /= 10.0**_MAX_POW10_STEP
        n += _MAX_POW10_STEP
    if n >= 0:
        return x * 10.0**n
    return x / 10.0**-n


def frexp10(x: float) -> tuple[float, int]:
    """Decompose x into a base-10 mantissa and exponent.

    Returns (m, e) with x = m * 10**e and 0.1 <= |m| < 1, the decimal
    analogue of math.frexp. frexp10(0.0) is (0.0, 0); infinities and NaN
    are returned as (x, 0).

    The exponent is read from the exact decimal expansion of the double and
    the mantissa is rounded once. Every power of ten written as a literal,
    1e23 or 1e-125 alike, decomposes as (0.1, k + 1) even when its nearest
    double lies just below 10**k.

    Examples:
        frexp10(100.0) = (0.1, 3)
        frexp10(1e23) = (0.1, 24)
        frexp10(-0.05) = (-0.5, -1)
    """
    x = to_float(x)
    if x == 0 or not math.isfinite(x):
        return x, 0

    exact = Decimal(x)
    exponent = exact.adjusted() + 1

    # literal powers of ten, whichever side of 10**k their double falls on
    if abs(x) == float(f"1e{exponent}"):
        return math.copysign(0.1, x), exponent + 1
    if abs(x) == float(f"1e{exponent - 1}"):
        return math.copysign(0.1, x), exponent

    return float(exact.scaleb(-exponent, EXACT_DECIMAL_CONTEXT)), exponent


def round_n(x: float, n: int) -> float:
    """Round x to n significant decimal digits.

    Ties are broken to even at the last kept digit.

    Args:
        x: Value to round
        n: Number of significant digits (0 gives 0.0)

    Returns:
        The rounded value. Zero and non-finite inputs are returned as is, and
        so is x when n exceeds the 17 digits a double can hold.

    Raises:
        InvalidArgumentError: If n is negative

    Examples:
        round_n(123.0, 2) = 120.0
        round_n(1234.5678, 3) = 1230.0
        round_n(0.012345, 2) = 0.012
    """
    x = to_float(x)
    if n < 0:
        raise InvalidArgumentError(f"Number of significant digits must be non-negative, got {n}")
    if n == 0:
        return 0.0
    if x == 0 or not math.isfinite(x) or n > _MAX_SIGNIFICANT_DIGITS:
        return x

    mantissa, exponent = frexp10(x)
    digits = round_half_even(_scale_pow10(mantissa, n))
    return _scale_pow10(float(digits), exponent - n)
