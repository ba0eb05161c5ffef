"""Unit tests for whole-outline queries."""

import math

import pytest

from arcglyph.core.sdf import endpoint_list_extents, iter_arcs, sdf_from_endpoints
from arcglyph.domain import INFINITY, Arc, Endpoint, Extent, Point
from arcglyph.exceptions import InvariantViolationError

# Counter-clockwise 10x10 square
SQUARE = [
    Endpoint(0, 0, INFINITY),
    Endpoint(10, 0, 0.0),
    Endpoint(10, 10, 0.0),
    Endpoint(0, 10, 0.0),
    Endpoint(0, 0, 0.0),
]


class TestIterArcs:
    """Tests for iter_arcs."""

    def test_square(self):
        arcs = list(iter_arcs(SQUARE))
        assert [i for i, _ in arcs] == [1, 2, 3, 4]
        assert arcs[0][1] == Arc(Point(0, 0), Point(10, 0), 0.0)
        assert arcs[-1][1] == Arc(Point(0, 10), Point(0, 0), 0.0)

    def test_moves_break_the_chain(self):
        endpoints = [
            Endpoint(0, 0, INFINITY),
            Endpoint(1, 0, 0.0),
            Endpoint(5, 5, INFINITY),
            Endpoint(6, 5, 0.5),
        ]
        arcs = [arc for _, arc in iter_arcs(endpoints)]
        assert arcs == [
            Arc(Point(0, 0), Point(1, 0), 0.0),
            Arc(Point(5, 5), Point(6, 5), 0.5),
        ]

    def test_arc_before_move_fails(self):
        with pytest.raises(InvariantViolationError):
            list(iter_arcs([Endpoint(1, 1, 0.0)]))


class TestExtents:
    """Tests for endpoint_list_extents."""

    def test_square(self):
        out = Extent()
        endpoint_list_extents(SQUARE, out)
        assert out.to_tuple() == (0, 0, 10, 10)

    def test_arc_bulge_is_included(self):
        out = Extent()
        endpoint_list_extents([Endpoint(0, 0, INFINITY), Endpoint(2, 0, 0.5)], out)
        assert out.to_tuple() == pytest.approx((0.0, -0.5, 2.0, 0.0))

    def test_empty(self):
        out = Extent()
        out.add(Point(1, 1))
        endpoint_list_extents([], out)
        assert out.is_empty()


class TestSdf:
    """Tests for sdf_from_endpoints."""

    def test_inside_and_outside_have_opposite_signs(self):
        inside, _ = sdf_from_endpoints(SQUARE, Point(5, 5))
        outside, _ = sdf_from_endpoints(SQUARE, Point(5, -3))
        assert inside > 0.0
        assert outside < 0.0

    def test_distance_inside_wedge(self):
        distance, index = sdf_from_endpoints(SQUARE, Point(5, -3))
        assert distance == pytest.approx(-3.0, rel=1e-3)
        assert index == 0

    def test_distance_at_center(self):
        distance, _ = sdf_from_endpoints(SQUARE, Point(5, 5))
        assert distance == pytest.approx(5.0, rel=1e-3)

    def test_distance_near_corner(self):
        distance, index = sdf_from_endpoints(SQUARE, Point(12, -2))
        assert distance == pytest.approx(-math.sqrt(8))
        assert index == 0

    def test_closest_arc_index(self):
        _, index = sdf_from_endpoints(SQUARE, Point(11, 5))
        assert index == 1

    def test_empty_outline(self):
        assert sdf_from_endpoints([], Point(0, 0)) == (INFINITY, 0)
        assert sdf_from_endpoints([Endpoint(0, 0, INFINITY)], Point(0, 0)) == (INFINITY, 0)

    def test_malformed_sequence_fails(self):
        with pytest.raises(InvariantViolationError):
            sdf_from_endpoints([Endpoint(0, 0, 0.0), Endpoint(1, 0, 0.0)], Point(0, 0))

    def test_repeated_point(self):
        endpoints = [Endpoint(0, 0, INFINITY), Endpoint(0, 0, 0.0), Endpoint(1, 0, 0.0)]
        distance, index = sdf_from_endpoints(endpoints, Point(-1, 0))
        assert distance == pytest.approx(1.0)
        assert index == 0

    def test_repeated_point_sign_from_next_arc(self):
        """A zero-length arc tying on distance leaves the sign to its neighbour."""
        endpoints = [Endpoint(0, 0, INFINITY), Endpoint(0, 0, 0.0), Endpoint(1, 0, 0.0)]
        below, _ = sdf_from_endpoints(endpoints, Point(-1, -1))
        above, _ = sdf_from_endpoints(endpoints, Point(-1, 1))
        assert below == pytest.approx(-math.sqrt(2))
        assert above == pytest.approx(math.sqrt(2))
