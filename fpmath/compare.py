"""Approximate comparison of floating-point values.

This module provides predicates that tolerate floating-point rounding error:
- equal: Knuth-style relative/absolute hybrid comparison
- Zero / NotZero / Small: unary predicates for scalars and sequences
- less_or_equal / greater_or_equal / numerically_less: orderings with tolerance
- abs_min / abs_max / abs_less / abs_greater: orderings by absolute value

All predicates are pure. Functor objects are immutable after construction.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Integral, Real
from typing import Any

from fpmath.coercion import to_float
from fpmath.config import DEFAULT_TOLERANCES, ToleranceConfig
from fpmath.constants import DEFAULT_EPSILON
from fpmath.errors import InvalidArgumentError

__all__ = [
    # Functions
    "equal",
    "knuth_equal_to_double",
    "is_zero",
    "is_nonzero",
    "is_small",
    "less_or_equal",
    "greater_or_equal",
    "numerically_less",
    "numeric_cmp",
    "abs_min",
    "abs_max",
    "abs_less",
    "abs_greater",
    # Functors
    "EqualTo",
    "Zero",
    "NotZero",
    "Small",
    "AbsLess",
    "AbsGreater",
]


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


# =============================================================================
# Knuth comparison
# =============================================================================


def equal(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Compare two floats with relative precision epsilon.

    See D.E.Knuth, "Seminumerical Algorithms", section 4.2.2. The tolerance
    is relative for |values| above one and absolute below:

        |a - b| <= epsilon * max(|a|, |b|, 1)

    Args:
        a: The first value
        b: The second value
        epsilon: Relative precision (must be non-negative)

    Returns:
        True if the values are equal within the tolerance. Identical values
        (including 0.0 and -0.0) are always equal. Any NaN gives False, and an
        infinity is only equal to the same infinity.
        Integers beyond the double range count as infinities.

    Raises:
        InvalidArgumentError: If epsilon is negative
    """
    if epsilon < 0:
        raise InvalidArgumentError(f"epsilon must be non-negative, got {epsilon}")
    a = to_float(a)
    b = to_float(b)
    if a == b:
        return True
    if not (math.isfinite(a) and math.isfinite(b)):
        return False
    return abs(a - b) <= epsilon * max(abs(a), abs(b), 1.0)


knuth_equal_to_double = equal


class EqualTo:
    """Binary equality functor.

    Floats compare with `equal`, integers exactly, and sequences element by
    element (sequences of different length are never equal).
    """

    __slots__ = ("_epsilon",)

    def __init__(
        self,
        epsilon: float | None = None,
        config: ToleranceConfig = DEFAULT_TOLERANCES,
    ) -> None:
        eps = config.epsilon if epsilon is None else epsilon
        if eps < 0:
            raise InvalidArgumentError(f"epsilon must be non-negative, got {eps}")
        self._epsilon = eps

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def __call__(self, v1: Any, v2: Any) -> bool:
        if _is_sequence(v1) and _is_sequence(v2):
            if len(v1) != len(v2):
                return False
            return all(self(x, y) for x, y in zip(v1, v2))
        if isinstance(v1, Integral) and isinstance(v2, Integral):
            return v1 == v2
        if isinstance(v1, Real) and isinstance(v2, Real):
            return equal(v1, v2, self._epsilon)
        return v1 == v2

    def __repr__(self) -> str:
        return f"EqualTo(epsilon={self._epsilon!r})"


# =============================================================================
# Zero / NotZero / Small
# =============================================================================


class Zero:
    """Is the value (or every element of a sequence) zero?

    Floats are zero if exactly zero or equal to zero within epsilon; other
    numbers must be exactly zero. An empty sequence is zero.
    """

    __slots__ = ("_cmp",)

    def __init__(self, config: ToleranceConfig = DEFAULT_TOLERANCES) -> None:
        self._cmp = EqualTo(config=config)

    def __call__(self, value: Any) -> bool:
        if _is_sequence(value):
            return all(self(v) for v in value)
        if isinstance(value, Integral):
            return value == 0
        if isinstance(value, Real):
            return value == 0 or self._cmp(to_float(value), 0.0)
        return value == 0


class NotZero:
    """Negation of Zero."""

    __slots__ = ("_zero",)

    def __init__(self, config: ToleranceConfig = DEFAULT_TOLERANCES) -> None:
        self._zero = Zero(config)

    def __call__(self, value: Any) -> bool:
        return not self._zero(value)


class Small:
    """Is the value sufficiently small?

    Holds the absolute value of the threshold given at construction.
    A sequence is small if it is empty or all of its elements are small.
    """

    __slots__ = ("_threshold",)

    def __init__(self, threshold: float) -> None:
        self._threshold = abs(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def __call__(self, value: Any) -> bool:
        if _is_sequence(value):
            return all(self(v) for v in value)
        return abs(value) <= self._threshold

    def __repr__(self) -> str:
        return f"Small({self._threshold!r})"


_ZERO = Zero()


def is_zero(value: Any) -> bool:
    """True if value is zero under the default tolerance."""
    return _ZERO(value)


def is_nonzero(value: Any) -> bool:
    return not _ZERO(value)


def is_small(value: Any, threshold: float) -> bool:
    return Small(threshold)(value)


# =============================================================================
# Ordering with tolerance
# =============================================================================


def less_or_equal(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """a <= b, or a and b are equal within epsilon."""
    return a <= b or equal(a, b, epsilon)


def greater_or_equal(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """a >= b, or a and b are equal within epsilon."""
    return a >= b or equal(a, b, epsilon)


def numerically_less(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Strict "less than" that treats near-equal values as incomparable.

    The relation is irreflexive and antisymmetric, so it can drive a sort
    (see numeric_cmp). Incomparability is not transitive: in a chain of
    values each within tolerance of the next, the ends may still compare
    as less, so near-equal clusters keep no guaranteed relative order.
    """
    return a < b and not equal(a, b, epsilon)


def numeric_cmp(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> int:
    """Three-way comparison built on numerically_less.

    Usage:
        sorted(values, key=functools.cmp_to_key(numeric_cmp))
        sorted(values, key=functools.cmp_to_key(functools.partial(numeric_cmp, epsilon=1e-3)))
    """
    if numerically_less(a, b, epsilon):
        return -1
    if numerically_less(b, a, epsilon):
        return 1
    return 0


# =============================================================================
# Absolute-value comparisons
# =============================================================================


def abs_min(v1: float, v2: float) -> float:
    """min(|v1|, |v2|)"""
    return min(abs(v1), abs(v2))


def abs_max(v1: float, v2: float) -> float:
    """max(|v1|, |v2|)"""
    return max(abs(v1), abs(v2))


def abs_less(v1: float, v2: float) -> bool:
    return abs(v1) < abs(v2)


def abs_greater(v1: float, v2: float) -> bool:
    return abs(v1) > abs(v2)


class AbsLess:
    """Comparison by absolute value: |v1| < |v2|."""

    __slots__ = ()

    def __call__(self, v1: float, v2: float) -> bool:
        return abs_less(v1, v2)


class AbsGreater:
    """Comparison by absolute value: |v1| > |v2|."""

    __slots__ = ()

    def __call__(self, v1: float, v2: float) -> bool:
        return abs_greater(v1, v2)
