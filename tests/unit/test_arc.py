"""Unit tests for arc representation and core formulas."""

import math

import pytest

from arcglyph.domain import INFINITY, Arc, Point, cos2atan, sin2atan, tan2atan


class TestHalfAngleFormulas:
    """Tests for sin2atan, cos2atan and tan2atan."""

    @pytest.mark.parametrize("d", [-3.0, -0.5, 0.0, 0.25, 0.9, 2.0])
    def test_match_trigonometry(self, d):
        angle = 2.0 * math.atan(d)
        assert sin2atan(d) == pytest.approx(math.sin(angle))
        assert cos2atan(d) == pytest.approx(math.cos(angle))

    def test_tan2atan(self):
        assert tan2atan(0.5) == pytest.approx(4.0 / 3.0)
        assert tan2atan(0.0) == 0.0

    def test_tan2atan_half_circle_is_signed_infinity(self):
        assert tan2atan(1.0) == INFINITY
        assert tan2atan(-1.0) == -INFINITY

    def test_infinite_d(self):
        assert sin2atan(INFINITY) == 0.0
        assert cos2atan(INFINITY) == -1.0


class TestCenterAndRadius:
    """Tests for derived center and radius."""

    def test_small_arc(self):
        """(0,0) -> (2,0) with d = 0.5."""
        arc = Arc(Point(0, 0), Point(2, 0), 0.5)
        center = arc.center()
        assert center.x == pytest.approx(1.0, abs=1e-4)
        assert center.y == pytest.approx(0.75, abs=1e-4)
        assert arc.radius() == pytest.approx(1.25, abs=1e-4)

    def test_negative_d_mirrors_center(self):
        arc = Arc(Point(0, 0), Point(2, 0), -0.5)
        assert arc.center() == Point(1, -0.75)
        assert arc.radius() == pytest.approx(1.25)

    @pytest.mark.parametrize("d", [1.0, -1.0])
    def test_half_circle(self, d):
        arc = Arc(Point(0, 0), Point(2, 0), d)
        assert arc.center() == Point(1, 0)
        assert arc.radius() == pytest.approx(1.0)

    def test_large_arc(self):
        arc = Arc(Point(0, 0), Point(2, 0), 2.0)
        assert arc.center() == Point(1, -0.75)
        assert arc.radius() == pytest.approx(1.25)

    def test_straight_segment_has_center_at_infinity(self):
        arc = Arc(Point(0, 0), Point(2, 0), 0.0)
        assert arc.center().is_infinite()
        assert arc.radius() == INFINITY

    def test_full_circle(self):
        arc = Arc(Point(0, 0), Point(2, 0), INFINITY)
        assert arc.center() == Point(1, 0)
        assert arc.radius() == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "p0,p1,d",
        [
            (Point(0, 0), Point(2, 0), 0.5),
            (Point(-3, 7), Point(5, 1), -0.3),
            (Point(10, 10), Point(10, 40), 0.99),
            (Point(1, 2), Point(4, -6), 1.0),
            (Point(0, 0), Point(100, 50), 3.0),
            (Point(0, 0), Point(1, 1), -0.01),
        ],
    )
    def test_center_equidistant_from_endpoints(self, p0, p1, d):
        arc = Arc(p0, p1, d)
        center = arc.center()
        radius = arc.radius()
        tolerance = 1e-4 * max(1.0, radius)
        assert center.distance_to(p0) == pytest.approx(radius, abs=tolerance)
        assert center.distance_to(p1) == pytest.approx(radius, abs=tolerance)


class TestTangents:
    """Tests for arc tangents."""

    def test_small_arc_tangents(self):
        arc = Arc(Point(0, 0), Point(2, 0), 0.5)
        t0, t1 = arc.tangents()
        assert t0 == Point(0.6, -0.8)
        assert t1 == Point(0.6, 0.8)

    @pytest.mark.parametrize("d", [0.5, -0.7, 1.0, 2.5])
    def test_tangents_perpendicular_to_radius(self, d):
        arc = Arc(Point(1, 1), Point(5, 3), d)
        center = arc.center()
        t0, t1 = arc.tangents()
        assert (arc.p0 - center).dot(t0) == pytest.approx(0.0, abs=1e-9)
        assert (arc.p1 - center).dot(t1) == pytest.approx(0.0, abs=1e-9)

    def test_straight_segment_tangents_follow_chord(self):
        arc = Arc(Point(0, 0), Point(4, 0), 0.0)
        t0, t1 = arc.tangents()
        assert t0 == Point(2, 0)
        assert t1 == Point(2, 0)


class TestConstructors:
    """Tests for Arc.from_points and Arc.from_center_radius_angle."""

    def test_from_points_through_lowest_point(self):
        arc = Arc.from_points(Point(0, 0), Point(2, 0), Point(1, -0.5))
        assert arc.d == pytest.approx(0.5)
        assert arc.center() == Point(1, 0.75)

    def test_from_points_coincident_is_straight(self):
        arc = Arc.from_points(Point(0, 0), Point(2, 0), Point(0, 0))
        assert arc.d == 0.0

    def test_from_center_radius_angle_complement(self):
        arc = Arc.from_center_radius_angle(Point(0, 0), 1.0, 0.0, math.pi / 2, complement=True)
        assert arc.p0 == Point(1, 0)
        assert arc.p1 == Point(0, 1)
        assert arc.d == pytest.approx(math.tan(math.pi / 8))
        assert arc.center() == Point(0, 0)
        assert arc.radius() == pytest.approx(1.0)

    def test_from_center_radius_angle_default_is_other_side(self):
        arc = Arc.from_center_radius_angle(Point(0, 0), 1.0, 0.0, math.pi / 2)
        assert arc.is_large()
        assert arc.center() == Point(0, 0)
        assert arc.radius() == pytest.approx(1.0)


class TestComplement:
    """Tests for the complementary arc."""

    def test_complement_d(self):
        arc = Arc(Point(0, 0), Point(2, 0), 0.5)
        assert arc.complement().d == pytest.approx(3.0)

    def test_complement_of_half_circle_is_full_circle(self):
        arc = Arc(Point(0, 0), Point(2, 0), 1.0)
        assert arc.complement().d == INFINITY

    def test_complement_shares_endpoints(self):
        arc = Arc(Point(0, 0), Point(2, 0), -0.25)
        other = arc.complement()
        assert other.p0 == arc.p0
        assert other.p1 == arc.p1
        assert other.d == pytest.approx(0.75 / 1.25)

