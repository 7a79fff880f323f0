"""Tolerance configuration for the comparison functors."""

from dataclasses import dataclass

from fpmath.constants import DEFAULT_EPSILON, ULPS_DOUBLE, ULPS_FLOAT, ULPS_FLOAT_LOW
from fpmath.errors import InvalidArgumentError


@dataclass(frozen=True)
class ToleranceConfig:
    """Bundle of tolerances used by the comparison functors.

    Instances are immutable, so a functor built from a config keeps its
    behavior for its whole lifetime.

    Attributes:
        epsilon: Relative precision for Knuth comparison (default: 1e-6)
        ulps_float: ULP tolerance for single-precision values (default: 100)
        ulps_float_low: Loose ULP tolerance for single precision (default: 1000)
        ulps_double: ULP tolerance for double-precision values (default: 1000)
    """

    epsilon: float = DEFAULT_EPSILON
    ulps_float: int = ULPS_FLOAT
    ulps_float_low: int = ULPS_FLOAT_LOW
    ulps_double: int = ULPS_DOUBLE

    def __post_init__(self) -> None:
        if self.epsilon < 0:
            raise InvalidArgumentError(f"epsilon must be non-negative, got {self.epsilon}")
        for name in ("ulps_float", "ulps_float_low", "ulps_double"):
            if getattr(self, name) < 0:
                raise InvalidArgumentError(f"{name} must be non-negative, got {getattr(self, name)}")


# Default configuration instance
DEFAULT_TOLERANCES = ToleranceConfig()
