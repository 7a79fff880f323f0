"""fpmath - floating-point comparison and rounding helpers."""

from fpmath.compare import (
    AbsGreater,
    AbsLess,
    EqualTo,
    NotZero,
    Small,
    Zero,
    abs_greater,
    abs_less,
    abs_max,
    abs_min,
    equal,
    greater_or_equal,
    is_nonzero,
    is_small,
    is_zero,
    knuth_equal_to_double,
    less_or_equal,
    numeric_cmp,
    numerically_less,
)
from fpmath.config import DEFAULT_TOLERANCES, ToleranceConfig
from fpmath.constants import (
    DEFAULT_EPSILON,
    HI_TOLERANCE,
    INV_SQRT_12,
    LOOSE_TOLERANCE,
    LOW_TOLERANCE,
    SQRT_12,
    ULPS_DOUBLE,
    ULPS_FLOAT,
    ULPS_FLOAT_LOW,
)
from fpmath.errors import InvalidArgumentError, LengthMismatchError, NumericError
from fpmath.rounding import frexp10, round_half_even, round_n
from fpmath.sequences import dot_fma, negate, scale, shift
from fpmath.ulp import (
    Lomont,
    equal_to_int,
    equal_to_uint,
    is_int,
    is_long,
    is_uint,
    lomont_compare_double,
    lomont_compare_float,
    next_double,
    next_float,
    ulp_distance,
    ulp_distance_float,
)

__version__ = "0.1.0"
__all__ = [
    # Constants
    "DEFAULT_EPSILON",
    "HI_TOLERANCE",
    "LOW_TOLERANCE",
    "LOOSE_TOLERANCE",
    "SQRT_12",
    "INV_SQRT_12",
    "ULPS_FLOAT",
    "ULPS_FLOAT_LOW",
    "ULPS_DOUBLE",
    # Config
    "ToleranceConfig",
    "DEFAULT_TOLERANCES",
    # Errors
    "NumericError",
    "InvalidArgumentError",
    "LengthMismatchError",
    # Comparison
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
    "EqualTo",
    "Zero",
    "NotZero",
    "Small",
    "AbsLess",
    "AbsGreater",
    # ULP comparison
    "lomont_compare_double",
    "lomont_compare_float",
    "ulp_distance",
    "ulp_distance_float",
    "next_double",
    "next_float",
    "Lomont",
    "equal_to_int",
    "equal_to_uint",
    "is_int",
    "is_long",
    "is_uint",
    # Rounding
    "round_half_even",
    "frexp10",
    "round_n",
    # Sequences
    "scale",
    "shift",
    "negate",
    "dot_fma",
    "__version__",
]
