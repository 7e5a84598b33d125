"""
Tests for fill policy parsing.
"""

import numpy as np
import pytest

from seqfill import (
    Constant,
    DEFAULT_POLICY,
    Interpolate,
    InvalidMethodError,
    Kernel,
    Next,
    NoFill,
    Previous,
    parse_policy,
)


class TestParsePolicy:
    """Tests for parse_policy."""

    @pytest.mark.parametrize(
        "spec, expected",
        [
            ("none", NoFill()),
            ("previous", Previous()),
            ("next", Next()),
            ("nearest", Interpolate(Kernel.NEAREST)),
            ("linear", Interpolate(Kernel.LINEAR)),
            ("spline", Interpolate(Kernel.SPLINE)),
            ("pchip", Interpolate(Kernel.PCHIP)),
            ("cubic", Interpolate(Kernel.CUBIC)),
            ("Spline", Interpolate(Kernel.SPLINE)),
        ],
    )
    def test_method_names(self, spec, expected):
        assert parse_policy(spec) == expected

    @pytest.mark.parametrize("value", [0, 1.5, np.int32(3), np.float32(2.5), np.array(4.0), np.array([[6]])])
    def test_numbers_are_constants(self, value):
        policy = parse_policy(value)
        assert isinstance(policy, Constant)
        assert policy.value == float(np.asarray(value).reshape(()))

    def test_nan_is_a_constant(self):
        policy = parse_policy(np.nan)
        assert isinstance(policy, Constant)
        assert np.isnan(policy.value)

    def test_numeric_string_is_a_method_name(self):
        with pytest.raises(InvalidMethodError):
            parse_policy("0")

    def test_kernel_passes(self):
        assert parse_policy(Kernel.PCHIP) == Interpolate(Kernel.PCHIP)

    def test_policy_passes(self):
        policy = Constant(2.0)
        assert parse_policy(policy) is policy

    @pytest.mark.parametrize("spec", ["bogus", "", " linear", "ffill"])
    def test_unknown_names(self, spec):
        with pytest.raises(InvalidMethodError) as excinfo:
            parse_policy(spec)
        assert excinfo.value.method == spec

    @pytest.mark.parametrize("spec", [True, None, [1.0, 2.0], 1 + 2j, np.array([1.0, 2.0])])
    def test_not_a_policy(self, spec):
        with pytest.raises(InvalidMethodError):
            parse_policy(spec)

    def test_default_is_linear(self):
        assert DEFAULT_POLICY == Interpolate(Kernel.LINEAR)
