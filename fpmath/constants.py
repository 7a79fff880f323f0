"""Numeric constants shared by the comparison and rounding helpers.

Absolute thresholds and ULP counts are module-level constants: they are
part of the library's contract, not runtime configuration.
"""

# Absolute thresholds for numerical calculations
HI_TOLERANCE = 1e-40
LOW_TOLERANCE = 1e-20
LOOSE_TOLERANCE = 1e-5

# sqrt(12) and 1/sqrt(12): RMS of a uniform distribution of unit width
SQRT_12 = 3.4641016151377546
INV_SQRT_12 = 0.2886751345948129

# Default relative precision for Knuth-style comparison
DEFAULT_EPSILON = 1.0e-6

# ULP tolerances for Lomont comparison.
# ULPS_FLOAT ~ relative 6e-6 for |x| > 1e-37
# ULPS_FLOAT_LOW ~ relative 6e-5 for |x| > 1e-37
# ULPS_DOUBLE ~ relative 6e-13 for |x| > 1e-304
ULPS_FLOAT = 100
ULPS_FLOAT_LOW = 1000
ULPS_DOUBLE = 1000

# Integer ranges
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
