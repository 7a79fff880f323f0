"""ULP-based ("Lomont") comparison of floating-point values.

Two floats are ULP-equal when the number of representable values between
them does not exceed a tolerance. Unlike a relative-epsilon test this keeps
a uniform meaning across the whole range, down to subnormals.

The distance is computed on IEEE-754 bit patterns: the bits are
reinterpreted as an unsigned integer (via struct, never by aliasing) and
mapped to a signed ordinal that is monotonic in the float value:

    ordinal(x) =  bits(x)             if the sign bit is clear
    ordinal(x) = -(bits(x) & ~sign)   if the sign bit is set

so +0.0 and -0.0 share ordinal 0 and values straddling zero have a
well-defined distance. See C. Lomont, "Taking Floating Point Numbers
Seriously", and D.E.Knuth, "Seminumerical Algorithms", section 4.2.2.
"""

from __future__ import annotations

import math
import struct

from fpmath.coercion import to_float
from fpmath.config import DEFAULT_TOLERANCES, ToleranceConfig
from fpmath.constants import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT32_MAX,
    ULPS_DOUBLE,
    ULPS_FLOAT,
)
from fpmath.errors import InvalidArgumentError

__all__ = [
    # Comparison
    "lomont_compare_double",
    "lomont_compare_float",
    "ulp_distance",
    "ulp_distance_float",
    "next_double",
    "next_float",
    "Lomont",
    # Integer detection
    "equal_to_int",
    "equal_to_uint",
    "is_int",
    "is_long",
    "is_uint",
]

# =============================================================================
# Bit-pattern layouts
# =============================================================================

_DOUBLE_SIGN = 1 << 63
_DOUBLE_MAGNITUDE = _DOUBLE_SIGN - 1
_DOUBLE_INF_BITS = 0x7FF0_0000_0000_0000

_FLOAT_SIGN = 1 << 31
_FLOAT_MAGNITUDE = _FLOAT_SIGN - 1
_FLOAT_INF_BITS = 0x7F80_0000


def _double_ordinal(x: float) -> int:
    (bits,) = struct.unpack("<Q", struct.pack("<d", x))
    if bits & _DOUBLE_SIGN:
        return -(bits & _DOUBLE_MAGNITUDE)
    return bits


def _double_from_ordinal(ordinal: int) -> float:
    ordinal = max(-_DOUBLE_INF_BITS, min(ordinal, _DOUBLE_INF_BITS))
    bits = ordinal if ordinal >= 0 else _DOUBLE_SIGN | -ordinal
    (value,) = struct.unpack("<d", struct.pack("<Q", bits))
    return value


def _to_float32(x: float) -> float:
    """Round a double to single precision, as a C cast would.

    Finite values that round beyond FLT_MAX become infinities.
    """
    x = to_float(x)
    try:
        packed = struct.pack("<f", x)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, x))
    (value,) = struct.unpack("<f", packed)
    return value


def _float_ordinal(x: float) -> int:
    (bits,) = struct.unpack("<I", struct.pack("<f", x))
    if bits & _FLOAT_SIGN:
        return -(bits & _FLOAT_MAGNITUDE)
    return bits


def _float_from_ordinal(ordinal: int) -> float:
    ordinal = max(-_FLOAT_INF_BITS, min(ordinal, _FLOAT_INF_BITS))
    bits = ordinal if ordinal >= 0 else _FLOAT_SIGN | -ordinal
    (value,) = struct.unpack("<f", struct.pack("<I", bits))
    return value


def _check_ulps(ulps: int) -> None:
    if ulps < 0:
        raise InvalidArgumentError(f"ULP tolerance must be non-negative, got {ulps}")


# =============================================================================
# Comparison
# =============================================================================


def lomont_compare_double(a: float, b: float, ulps: int = ULPS_DOUBLE) -> bool:
    """Compare two doubles by ULP distance.

    Args:
        a: The first value
        b: The second value
        ulps: Maximal allowed number of representable values between a and b

    Returns:
        True if a and b are within ulps of each other. NaN is never equal to
        anything; an infinity is only equal to the same infinity.

    Raises:
        InvalidArgumentError: If ulps is negative
    """
    _check_ulps(ulps)
    a = to_float(a)
    b = to_float(b)
    if a == b:
        return True
    if not (math.isfinite(a) and math.isfinite(b)):
        return False
    return abs(_double_ordinal(a) - _double_ordinal(b)) <= ulps


def lomont_compare_float(a: float, b: float, ulps: int = ULPS_FLOAT) -> bool:
    """Compare two values by ULP distance in single precision.

    Both arguments are first rounded to single precision.

    Raises:
        InvalidArgumentError: If ulps is negative
    """
    _check_ulps(ulps)
    fa = _to_float32(a)
    fb = _to_float32(b)
    if fa == fb:
        return True
    if not (math.isfinite(fa) and math.isfinite(fb)):
        return False
    return abs(_float_ordinal(fa) - _float_ordinal(fb)) <= ulps


def ulp_distance(a: float, b: float) -> int:
    """Number of representable doubles between a and b.

    Raises:
        InvalidArgumentError: If either value is NaN
    """
    a = to_float(a)
    b = to_float(b)
    if math.isnan(a) or math.isnan(b):
        raise InvalidArgumentError("ULP distance is undefined for NaN")
    return abs(_double_ordinal(a) - _double_ordinal(b))


def ulp_distance_float(a: float, b: float) -> int:
    """Number of representable single-precision values between a and b.

    Raises:
        InvalidArgumentError: If either value is NaN
    """
    a = _to_float32(a)
    b = _to_float32(b)
    if math.isnan(a) or math.isnan(b):
        raise InvalidArgumentError("ULP distance is undefined for NaN")
    return abs(_float_ordinal(a) - _float_ordinal(b))


def next_double(x: float, ulps: int = 1) -> float:
    """The double ulps representable steps away from x.

    Negative ulps step towards -inf. Results saturate at the infinities,
    and NaN is returned unchanged.
    """
    x = to_float(x)
    if math.isnan(x):
        return x
    return _double_from_ordinal(_double_ordinal(x) + ulps)


def next_float(x: float, ulps: int = 1) -> float:
    """Single-precision counterpart of next_double."""
    x = _to_float32(x)
    if math.isnan(x):
        return x
    return _float_from_ordinal(_float_ordinal(x) + ulps)


class Lomont:
    """ULP-comparison functor.

    Usage:
        cmp = Lomont()                 # double precision, ULPS_DOUBLE
        cmp = Lomont(single=True)      # single precision, ULPS_FLOAT
        cmp = Lomont(ulps=10)
        cmp(1.0, next_double(1.0, 5))  # True
    """

    __slots__ = ("_ulps", "_single")

    def __init__(
        self,
        ulps: int | None = None,
        single: bool = False,
        config: ToleranceConfig = DEFAULT_TOLERANCES,
    ) -> None:
        if ulps is None:
            ulps = config.ulps_float if single else config.ulps_double
        _check_ulps(ulps)
        self._ulps = ulps
        self._single = single

    @property
    def ulps(self) -> int:
        return self._ulps

    @property
    def single(self) -> bool:
        return self._single

    def __call__(self, a: float, b: float) -> bool:
        if self._single:
            return lomont_compare_float(a, b, self._ulps)
        return lomont_compare_double(a, b, self._ulps)

    def __repr__(self) -> str:
        return f"Lomont(ulps={self._ulps!r}, single={self._single!r})"


# =============================================================================
# Integer detection
# =============================================================================


def equal_to_int(value: float, ref: int, ulps: int = ULPS_DOUBLE) -> bool:
    """Is value ULP-equal to the integer ref?"""
    return lomont_compare_double(value, to_float(ref), ulps)


def equal_to_uint(value: float, ref: int, ulps: int = ULPS_DOUBLE) -> bool:
    """Is value ULP-equal to the non-negative integer ref?

    Raises:
        InvalidArgumentError: If ref is negative
    """
    if ref < 0:
        raise InvalidArgumentError(f"Unsigned reference must be non-negative, got {ref}")
    return lomont_compare_double(value, to_float(ref), ulps)


def _is_integral_in(x: float, lo: int, hi: int, ulps: int) -> bool:
    x = to_float(x)
    if not math.isfinite(x):
        return False
    nearest = round(x)
    if not lo <= nearest <= hi:
        return False
    return equal_to_int(x, nearest, ulps)


def is_int(x: float, ulps: int = ULPS_DOUBLE) -> bool:
    """Is x a 32-bit signed integer within ulps?"""
    return _is_integral_in(x, INT32_MIN, INT32_MAX, ulps)


def is_long(x: float, ulps: int = ULPS_DOUBLE) -> bool:
    """Is x a 64-bit signed integer within ulps?"""
    return _is_integral_in(x, INT64_MIN, INT64_MAX, ulps)


def is_uint(x: float, ulps: int = ULPS_DOUBLE) -> bool:
    """Is x a 32-bit unsigned integer within ulps?"""
    return _is_integral_in(x, 0, UINT32_MAX, ulps)
