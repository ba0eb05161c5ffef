"""Straight-line geometry used by the arc kernel.

This module provides the segment and line primitives that degenerate arcs
fall back to:
- Implicit lines (n . p = c) and the signed shortest vector to them
- Nearest point on a segment
- Segment distance and squared distance
- Segment span containment (the straight-segment analogue of a wedge)

All functions are pure, stateless, and designed for use in parallel processing.
"""

import math
from dataclasses import dataclass

from arcglyph.domain import INFINITY, Point, SignedVector, float_equals


@dataclass(frozen=True, slots=True)
class Line:
    """An implicit line n.x * x + n.y * y = c.

    Attributes:
        n: Line normal (not necessarily unit length)
        c: Offset along the normal
    """

    n: Point
    c: float

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> "Line":
        """Line through two points, normal rotated counter-clockwise from p1 - p0."""
        n = (p1 - p0).orthogonal()
        return cls(n, n.dot(p0))

    def normalized(self) -> "Line":
        """Same line with a unit normal (unchanged if the normal is zero)."""
        length = self.n.length()
        if float_equals(length, 0.0):
            return self
        return Line(self.n / length, self.c / length)

    def intersect(self, other: "Line") -> Point:
        """Intersection point, or a point at infinity for parallel lines."""
        det = self.n.cross(other.n)
        if det == 0.0:
            return Point(INFINITY, INFINITY)
        return Point(
            (self.c * other.n.y - self.n.y * other.c) / det,
            (self.n.x * other.c - self.c * other.n.x) / det,
        )

    def sub(self, p: Point) -> SignedVector:
        """Shortest vector from the line to p, negative when p is behind the normal."""
        length = self.n.length()
        mag = -(self.n.dot(p) - self.c) / length
        return SignedVector(self.n * (mag / length), mag < 0.0)


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment endpoints.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance) where nearest_point is the closest
        point on the segment and distance is the Euclidean distance to it

    Examples:
        >>> nearest, dist = nearest_point_on_segment(
        ...     Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0)
        ... )
        >>> # nearest should be (1.0, 0.0), dist should be 1.0
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    # Handle zero-length segment
    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-10:
        return seg_start, point.distance_to(seg_start)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = Point(seg_start.x + t * dx, seg_start.y + t * dy)
    return nearest, math.hypot(point.x - nearest.x, point.y - nearest.y)


def segment_sub(p0: Point, p1: Point, p: Point) -> SignedVector:
    """Shortest signed vector from p to the line through a segment.

    The sign is negative when p lies to the left of p0 -> p1, the side the
    center of an arc with small positive d would be on.
    """
    if p0.equals(p1):
        return SignedVector(Point(0.0, 0.0), False)
    return Line.from_points(p1, p0).sub(p).neg()


def segment_distance_to_point(p0: Point, p1: Point, p: Point) -> float:
    """Unsigned distance from p to the segment p0 -> p1."""
    _, distance = nearest_point_on_segment(p, p0, p1)
    return distance


def segment_squared_distance_to_point(p0: Point, p1: Point, p: Point) -> float:
    """Squared distance from p to the segment p0 -> p1."""
    nearest, _ = nearest_point_on_segment(p, p0, p1)
    return p.squared_distance_to(nearest)


def segment_span_contains(p0: Point, p1: Point, p: Point) -> bool:
    """True if p projects onto the segment (boundary inclusive).

    This is the slab between the two perpendiculars through the endpoints,
    which is what an arc's wedge becomes as d approaches zero.
    """
    dp = p1 - p0
    if dp.length_squared() == 0.0:
        return p.equals(p0)
    return (p - p0).dot(dp) >= 0.0 and (p - p1).dot(dp) <= 0.0


def xor(a: bool, b: bool) -> bool:
    """Logical exclusive or."""
    return a != b
