"""Distance and containment queries against circular arcs.

This module implements the signed-distance building blocks for arc outlines:
- wedge_contains_point: is a point inside the angular sector swept by an arc
- sub: signed shortest displacement from a point to an arc
- distance_to_point / squared_distance_to_point: unsigned distance
- signed_distance_to_point: distance carrying the inside/outside sign
- extended_dist: projection distance that stays continuous across the seam
  between adjacent arcs
- extents: tight bounding box of an arc

Arcs with |d| below DEGENERATE_D are treated as straight segments by every
query here, since the arc formulas divide by values that approach zero.
"""

import math

from arcglyph.core.geometry import (
    Line,
    segment_distance_to_point,
    segment_span_contains,
    segment_squared_distance_to_point,
    segment_sub,
    xor,
)
from arcglyph.domain import Arc, Extent, Point, SignedVector, tan2atan

_ZERO = Point(0.0, 0.0)


def wedge_contains_point(arc: Arc, p: Point) -> bool:
    """Check whether p lies in the angular sector swept by the arc.

    The wedge is bounded by the lines from the center through p0 and p1;
    those lines are included.

    Args:
        arc: The arc
        p: Query point

    Returns:
        True if p is inside the wedge
    """
    if arc.is_degenerate():
        return segment_span_contains(arc.p0, arc.p1, p)
    if math.isinf(arc.d):
        # Full circle
        return True

    t0, t1 = arc.tangents()
    ahead_of_start = (p - arc.p0).dot(t0) >= 0.0
    behind_end = (p - arc.p1).dot(t1) <= 0.0

    if abs(arc.d) <= 1.0:
        return ahead_of_start and behind_end
    # More than half a circle: the sector is the union of the half-planes
    return ahead_of_start or behind_end


def sub(arc: Arc, p: Point) -> SignedVector:
    """Signed shortest displacement from p to the arc.

    Inside the wedge the displacement points radially towards the circle.
    Outside, it is taken against the line through the nearer endpoint and the
    sign comes from the complementary arc, which keeps the sign continuous
    across the wedge boundary.

    Args:
        arc: The arc
        p: Query point

    Returns:
        SignedVector whose negative flag marks the inner side
    """
    if arc.is_degenerate():
        return segment_sub(arc.p0, arc.p1, p)

    center = arc.center()
    radius = arc.radius()

    if wedge_contains_point(arc, p):
        to_center = center - p
        distance = to_center.length()
        negative = xor(arc.d < 0.0, distance < radius)
        if distance == 0.0:
            return SignedVector(_ZERO, negative)
        return SignedVector(to_center.normalize() * abs(distance - radius), negative)

    d0 = p.squared_distance_to(arc.p0)
    d1 = p.squared_distance_to(arc.p1)
    nearer = arc.p0 if d0 < d1 else arc.p1

    normal = center - nearer
    if normal.length_squared() == 0.0:
        return SignedVector(_ZERO, True)

    line = Line(normal, normal.dot(nearer))
    return SignedVector(line.sub(p).vector, not wedge_contains_point(arc.complement(), p))


def sub_point_from_arc(p: Point, arc: Arc) -> SignedVector:
    """Displacement from the arc to p (the negation of sub(arc, p))."""
    return sub(arc, p).neg()


def distance_to_point(arc: Arc, p: Point) -> float:
    """Unsigned distance from p to the arc.

    Inside the wedge this is |dist(p, center) - radius|; outside it is the
    distance to the nearer endpoint. Degenerate arcs use segment distance.
    """
    if arc.is_degenerate():
        return segment_distance_to_point(arc.p0, arc.p1, p)

    if wedge_contains_point(arc, p):
        return abs(p.distance_to(arc.center()) - arc.radius())

    return math.sqrt(min(p.squared_distance_to(arc.p0), p.squared_distance_to(arc.p1)))


def squared_distance_to_point(arc: Arc, p: Point) -> float:
    """Squared distance from p to the arc."""
    if arc.is_degenerate():
        return segment_squared_distance_to_point(arc.p0, arc.p1, p)

    if wedge_contains_point(arc, p):
        answer = p.distance_to(arc.center()) - arc.radius()
        return answer * answer

    return min(p.squared_distance_to(arc.p0), p.squared_distance_to(arc.p1))


def signed_distance_to_point(arc: Arc, p: Point) -> float:
    """Distance from p to the arc, negative on the side flagged by sub()."""
    distance = distance_to_point(arc, p)
    return -distance if sub(arc, p).negative else distance


def _edge_normal(pp: Point, dp: Point, tan_half: float) -> Point:
    """Unit normal of pp + dp * tan_half, taking the limit for infinite tan_half."""
    if math.isinf(tan_half):
        return dp.normalize() * math.copysign(1.0, tan_half)
    return (pp + dp * tan_half).normalize()


def extended_dist(arc: Arc, p: Point) -> float:
    """Projection distance used to blend adjacent arcs continuously.

    Points on the p0 side of the chord midpoint are projected from p0 onto
    the normal of the end-of-wedge line at p0; the rest from p1.

    Args:
        arc: The arc
        p: Query point

    Returns:
        Signed projection distance, 0.0 for an arc whose endpoints coincide
    """
    m = arc.p0.lerp(arc.p1, 0.5)
    dp = arc.p1 - arc.p0
    if dp.length_squared() == 0.0:
        return 0.0
    pp = dp.orthogonal()
    d2 = tan2atan(arc.d)

    if (p - m).dot(arc.p1 - m) < 0.0:
        return (p - arc.p0).dot(_edge_normal(pp, dp, d2))
    return (p - arc.p1).dot(_edge_normal(pp, dp, -d2))


def extents(arc: Arc, out: Extent) -> None:
    """Compute the tight bounding box of an arc into out.

    Adds both endpoints, then each axis-extreme point of the circle that
    falls inside the arc's wedge.

    Args:
        arc: The arc
        out: Extent to reset and fill
    """
    out.clear()
    out.add(arc.p0)
    out.add(arc.p1)

    if arc.is_degenerate():
        return

    c = arc.center()
    r = arc.radius()
    for direction in (Point(-1.0, 0.0), Point(1.0, 0.0), Point(0.0, -1.0), Point(0.0, 1.0)):
        candidate = c + direction * r
        if wedge_contains_point(arc, candidate):
            out.add(candidate)
