"""Queries over whole arc endpoint sequences.

An endpoint sequence describes a glyph outline as a chain of arcs: each
endpoint carries the d of the arc arriving at it, and d = INFINITY starts a
new sub-path. This module walks such sequences to compute the glyph's extent
and its signed distance at a point.
"""

from collections.abc import Iterator, Sequence

from arcglyph.core.distance import (
    extended_dist,
    extents,
    signed_distance_to_point,
    wedge_contains_point,
)
from arcglyph.domain import EPSILON, INFINITY, Arc, Endpoint, Extent, Point
from arcglyph.exceptions import InvariantViolationError


def iter_arcs(endpoints: Sequence[Endpoint]) -> Iterator[tuple[int, Arc]]:
    """Yield (index, arc) for every arc in an endpoint sequence.

    The index is that of the arc's end point in the sequence.

    Raises:
        InvariantViolationError: If an arc appears before any sub-path start
    """
    p0: Point | None = None
    for i, endpoint in enumerate(endpoints):
        if endpoint.is_move():
            p0 = endpoint.point
            continue
        if p0 is None:
            raise InvariantViolationError("Arc endpoint before any move", index=i)
        yield i, Arc(p0, endpoint.point, endpoint.d)
        p0 = endpoint.point


def endpoint_list_extents(endpoints: Sequence[Endpoint], out: Extent) -> None:
    """Compute the union of the tight extents of every arc in a sequence.

    Args:
        endpoints: Endpoint sequence
        out: Extent to reset and fill
    """
    out.clear()
    arc_extent = Extent()
    for _, arc in iter_arcs(endpoints):
        extents(arc, arc_extent)
        out.extend(arc_extent)


def sdf_from_endpoints(endpoints: Sequence[Endpoint], p: Point) -> tuple[float, int]:
    """Signed distance from p to the outline described by an endpoint sequence.

    Inside some arc's wedge the arc distance decides; otherwise the nearest
    endpoint does, and its sign is resolved with extended_dist on the arcs
    that tie for the minimum.

    Args:
        endpoints: Endpoint sequence
        p: Query point

    Returns:
        Tuple of (signed distance, index of the start endpoint of the
        closest arc)
    """
    closest_arc: Arc | None = None
    side = 0
    min_dist = INFINITY
    last_index = 0

    for i, arc in iter_arcs(endpoints):
        if wedge_contains_point(arc, p):
            sdist = signed_distance_to_point(arc, p)
            # Slightly favour wedge hits over endpoint ties
            udist = abs(sdist) * (1.0 - EPSILON)
            if udist <= min_dist:
                min_dist = udist
                last_index = i - 1
                side = -1 if sdist >= 0.0 else 1
        else:
            udist = min(p.distance_to(arc.p0), p.distance_to(arc.p1))
            if udist < min_dist:
                min_dist = udist
                last_index = i - 1
                side = 0
                closest_arc = arc
            elif side == 0 and udist == min_dist and closest_arc is not None:
                old_ext_dist = extended_dist(closest_arc, p)
                new_ext_dist = extended_dist(arc, p)
                ext_dist = old_ext_dist if abs(new_ext_dist) <= abs(old_ext_dist) else new_ext_dist
                side = 1 if ext_dist >= 0.0 else -1

    if min_dist == INFINITY:
        return INFINITY, 0

    if side == 0 and closest_arc is not None:
        side = 1 if extended_dist(closest_arc, p) >= 0.0 else -1

    return side * min_dist, last_index
