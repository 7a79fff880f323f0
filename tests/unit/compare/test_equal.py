"""Tests for Knuth-style approximate equality and the EqualTo functor."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fpmath.compare import EqualTo, equal, knuth_equal_to_double
from fpmath.config import ToleranceConfig
from fpmath.errors import InvalidArgumentError

finite_floats = st.floats(allow_nan=False, allow_infinity=False)


class TestEqual:
    """Tests for equal()."""

    def test_identical_values(self):
        """Identical values are equal regardless of epsilon."""
        assert equal(1.5, 1.5)
        assert equal(1.5, 1.5, epsilon=0.0)

    def test_signed_zeros(self):
        """0.0 and -0.0 are equal."""
        assert equal(0.0, -0.0)
        assert equal(-0.0, 0.0, epsilon=0.0)

    def test_relative_tolerance_for_large_values(self):
        """Above one the tolerance scales with the magnitude."""
        assert equal(1e6, 1e6 + 0.5)
        assert not equal(1e6, 1e6 + 2.0)

    def test_absolute_tolerance_below_one(self):
        """Below one the tolerance is absolute."""
        assert equal(1e-12, 2e-12)
        assert equal(0.0, 1e-7)
        assert not equal(0.0, 1e-5)

    def test_custom_epsilon(self):
        """A looser epsilon accepts larger differences."""
        assert not equal(1.0, 1.01)
        assert equal(1.0, 1.01, epsilon=0.1)

    def test_nan_is_never_equal(self, nan):
        """Any comparison with NaN is false."""
        assert not equal(nan, nan)
        assert not equal(nan, 1.0)
        assert not equal(1.0, nan)

    def test_infinities(self, inf):
        """Infinity only equals the same infinity."""
        assert equal(inf, inf)
        assert not equal(inf, -inf)
        assert not equal(inf, 1e308)
        assert not equal(1e308, inf)

    def test_integers_beyond_double_range(self):
        """Huge integers compare as infinities instead of overflowing."""
        assert equal(10**400, 10**400 + 1)
        assert not equal(10**400, 1.0)
        assert not equal(10**400, -(10**400))
        assert equal(10**400, math.inf)
        assert equal(10**20, 10**20 + 1)

    def test_negative_epsilon_raises(self):
        """Negative epsilon is rejected."""
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            equal(1.0, 1.0, epsilon=-1e-6)

    def test_knuth_alias(self):
        """knuth_equal_to_double is the same function."""
        assert knuth_equal_to_double is equal

    @given(finite_floats)
    def test_reflexive(self, a):
        """equal(a, a) for every finite a."""
        assert equal(a, a)

    @given(finite_floats, finite_floats)
    def test_symmetric(self, a, b):
        """equal(a, b) == equal(b, a)."""
        assert equal(a, b) == equal(b, a)


class TestEqualTo:
    """Tests for the EqualTo functor."""

    def test_floats_use_tolerance(self):
        """Floats compare with the default epsilon."""
        cmp = EqualTo()
        assert cmp(1.0, 1.0 + 1e-9)
        assert not cmp(1.0, 1.1)

    def test_integers_are_exact(self):
        """Integers compare exactly."""
        cmp = EqualTo(epsilon=0.5)
        assert cmp(3, 3)
        assert not cmp(3, 4)

    def test_explicit_epsilon_overrides_config(self):
        """An explicit epsilon wins over the config."""
        cmp = EqualTo(epsilon=0.1, config=ToleranceConfig(epsilon=1e-9))
        assert cmp.epsilon == 0.1
        assert cmp(1.0, 1.05)

    def test_config_epsilon(self):
        """Epsilon is taken from the config when not given."""
        cmp = EqualTo(config=ToleranceConfig(epsilon=1e-2))
        assert cmp.epsilon == 1e-2
        assert cmp(1.0, 1.005)

    def test_sequences_elementwise(self):
        """Sequences compare element by element."""
        cmp = EqualTo()
        assert cmp([1.0, 2.0], [1.0 + 1e-9, 2.0])
        assert not cmp([1.0, 2.0], [1.0, 2.1])

    def test_sequences_of_different_length(self):
        """Sequences of different length are never equal."""
        cmp = EqualTo()
        assert not cmp([1.0, 2.0], [1.0])
        assert cmp([], [])

    def test_nested_sequences(self):
        """Nested sequences are compared recursively."""
        cmp = EqualTo()
        assert cmp([[1.0], [2.0, 3.0]], ([1.0], (2.0, 3.0 + 1e-9)))

    def test_negative_epsilon_raises(self):
        """Negative epsilon is rejected at construction."""
        with pytest.raises(InvalidArgumentError):
            EqualTo(epsilon=-1.0)

    def test_immutable(self):
        """Attributes cannot be reassigned."""
        cmp = EqualTo()
        with pytest.raises(AttributeError):
            cmp.epsilon = 0.5  # type: ignore[misc]

    def test_nan_elements(self):
        """NaN elements make sequences unequal."""
        assert not EqualTo()([math.nan], [math.nan])

    def test_huge_integer_against_float(self):
        """A huge integer against a float does not overflow."""
        assert not EqualTo()(10**400, 1.0)
        assert EqualTo()(10**400, math.inf)
