"""Unit tests for approximate comparison."""
import math

import pytest

from raytracer.approx import (abs_diff_eq, approx_equal, relative_eq,
                              ulps_eq)
from raytracer.color import Color
from raytracer.vector import Vec3


class TestAbsDiffEq:
    """Tests for abs_diff_eq."""

    def test_within_epsilon(self):
        assert abs_diff_eq(1.0, 1.0 + 1e-6, epsilon=1e-5)

    def test_outside_epsilon(self):
        assert not abs_diff_eq(1.0, 1.1, epsilon=1e-5)

    def test_colors(self):
        assert abs_diff_eq(Color(0.1, 0.2, 0.3), Color(0.1, 0.2, 0.3 + 1e-9),
                           epsilon=1e-6)
        assert not abs_diff_eq(Color(0.1, 0.2, 0.3), Color(0.1, 0.25, 0.3),
                               epsilon=1e-6)

    def test_default_epsilon_is_tight(self):
        assert abs_diff_eq(0.1 + 0.2, 0.3)
        assert not abs_diff_eq(0.3, 0.3 + 1e-10)

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            abs_diff_eq(Color(0, 0, 0), [0, 0])


class TestRelativeEq:
    """Tests for relative_eq."""

    def test_large_values(self):
        assert relative_eq(1e10, 1e10 + 1, epsilon=1e-12, max_relative=1e-9)
        assert not abs_diff_eq(1e10, 1e10 + 1, epsilon=1e-12)

    def test_different_values(self):
        assert not relative_eq(1.0, 2.0, epsilon=1e-12, max_relative=1e-6)

    def test_infinity(self):
        assert relative_eq(math.inf, math.inf)
        assert not relative_eq(math.inf, -math.inf)
        assert not relative_eq(math.inf, 1e308, max_relative=1.0)

    def test_nan_is_never_equal(self):
        assert not relative_eq(math.nan, math.nan)


class TestUlpsEq:
    """Tests for ulps_eq."""

    def test_neighbouring_floats(self):
        a = 1.0
        b = math.nextafter(math.nextafter(a, 2.0), 2.0)
        assert ulps_eq(a, b, epsilon=0.0, max_ulps=2)
        assert not ulps_eq(a, b, epsilon=0.0, max_ulps=1)

    def test_negative_values(self):
        a = -1.0
        b = math.nextafter(a, -2.0)
        assert ulps_eq(a, b, epsilon=0.0, max_ulps=1)

    def test_different_signs(self):
        assert not ulps_eq(-1e-300, 1e-300, epsilon=0.0)
        assert ulps_eq(-0.0, 0.0, epsilon=0.0)

    def test_vectors(self):
        assert ulps_eq(Vec3(0.1 + 0.2, 1.0, 2.0), Vec3(0.3, 1.0, 2.0))


class TestApproxEqual:
    """Tests for approx_equal policy selection."""

    @pytest.mark.parametrize('policy', ['absolute', 'relative', 'ulps'])
    def test_policies(self, policy):
        a = Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25)
        assert approx_equal(a, Color(1.6, 0.7, 1.0), 1e-9, policy=policy)
        assert not approx_equal(a, Color(1.7, 0.7, 1.0), 1e-9, policy=policy)

    def test_policy_arguments(self):
        assert approx_equal(100.0, 101.0, 0.0, policy='relative',
                            max_relative=0.1)

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            approx_equal(1.0, 1.0, policy='exact')
