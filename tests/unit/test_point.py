"""Unit tests for point and vector algebra."""

import math

import pytest

from arcglyph.domain import EPSILON, Point, float_equals, is_zero
from arcglyph.exceptions import DegenerateVectorError, GeometryError


class TestFloatHelpers:
    """Tests for float_equals and is_zero."""

    def test_float_equals(self):
        assert float_equals(1.0, 1.0 + EPSILON / 2)
        assert not float_equals(1.0, 1.0 + EPSILON * 2)
        assert float_equals(1.0, 1.5, tolerance=1.0)

    def test_is_zero(self):
        assert is_zero(0.0)
        assert is_zero(-1.5e-4)
        assert not is_zero(1e-3)


class TestPointAlgebra:
    """Tests for Point arithmetic."""

    def test_add_and_subtract(self):
        a = Point(1, 2)
        b = Point(3, -1)
        assert a + b == Point(4, 1)
        assert a.add(b) == Point(4, 1)
        assert a - b == Point(-2, 3)
        assert a.subtract(b) == Point(-2, 3)
        assert -a == Point(-1, -2)

    def test_scale(self):
        p = Point(1, -2)
        assert p * 3 == Point(3, -6)
        assert 3 * p == Point(3, -6)
        assert p.scale(0.5) == Point(0.5, -1)
        assert p / 2 == Point(0.5, -1)

    def test_dot_and_cross(self):
        a = Point(1, 2)
        b = Point(3, 4)
        assert a.dot(b) == 11
        assert a.cross(b) == 1 * 4 - 2 * 3
        assert Point(1, 0).cross(Point(0, 1)) == 1

    def test_length(self):
        p = Point(3, 4)
        assert p.length() == 5
        assert p.length_squared() == 25

    def test_normalize(self):
        n = Point(3, 4).normalize()
        assert n == Point(0.6, 0.8)
        assert n.length() == pytest.approx(1.0)

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(DegenerateVectorError, match="normalize"):
            Point(0, 0).normalize()

    def test_degenerate_vector_is_geometry_error(self):
        with pytest.raises(GeometryError):
            Point(0, 0).normalize()

    def test_orthogonal(self):
        assert Point(1, 0).orthogonal() == Point(0, 1)
        assert Point(2, 3).orthogonal() == Point(-3, 2)

    def test_angle(self):
        assert Point(1, 0).angle() == 0.0
        assert Point(0, 1).angle() == pytest.approx(math.pi / 2)
        assert Point(-1, 0).angle() == pytest.approx(math.pi)


class TestPointInterpolation:
    """Tests for lerp, midpoint and distances."""

    def test_lerp_exact_at_ends(self):
        a = Point(0.1, 0.2)
        b = Point(0.7, 0.9)
        assert a.lerp(b, 0.0) is a
        assert a.lerp(b, 1.0) is b

    def test_lerp_interior(self):
        assert Point(0, 0).lerp(Point(10, 20), 0.25) == Point(2.5, 5)

    def test_midpoint(self):
        assert Point(0, 0).midpoint(Point(2, 4)) == Point(1, 2)

    def test_distances(self):
        a = Point(1, 1)
        b = Point(4, 5)
        assert a.distance_to(b) == 5
        assert a.squared_distance_to(b) == 25

    def test_rebase(self):
        v = Point(2, 3)
        assert v.rebase(Point(1, 0), Point(0, 1)) == v
        # Onto (0, 1) and its orthogonal (-1, 0)
        assert v.rebase_other(Point(0, 1)) == Point(3, -2)

    def test_is_infinite(self):
        assert Point(math.inf, 0).is_infinite()
        assert not Point(1, 2).is_infinite()

    def test_equals_custom_tolerance(self):
        assert Point(0, 0).equals(Point(0.5, -0.5), tolerance=1.0)
        assert not Point(0, 0).equals(Point(0.5, -0.5))
