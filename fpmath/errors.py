"""Error classes for the numeric helpers.

None of these are raised for non-finite input: comparisons follow IEEE
semantics and rounding saturates. They signal misuse of the API.
"""


class NumericError(ArithmeticError):
    """Base class for fpmath errors."""

    pass


class InvalidArgumentError(NumericError, ValueError):
    """Argument outside the domain of the operation."""

    pass


class LengthMismatchError(InvalidArgumentError):
    """Paired sequences have different lengths."""

    pass
