"""Core algorithms of the arc geometry kernel.

This module contains:

- Segment and line helpers used by the degenerate-arc branches
- Distance, containment and extent queries on single arcs
- Arc / cubic Bezier conversions in both directions
- Building arc endpoint sequences from drawing commands
- Queries over whole endpoint sequences (extents, signed distance)
- Reconstruction of path commands from endpoint sequences

All functions are pure and operate on immutable values, so they are safe
for use in worker processes. The parallel renderer lives in
arcglyph.core.processor.
"""

from arcglyph.core.accumulator import ArcAccumulator
from arcglyph.core.approximation import (
    D_BITS,
    MAX_D,
    QuantizedArcApproximator,
    approximate_bezier,
    approximate_bezier_with_arcs,
    arc_from_bezier_two_part,
    bezier_arc_error,
    max_deviation,
)
from arcglyph.core.distance import (
    distance_to_point,
    extended_dist,
    extents,
    signed_distance_to_point,
    squared_distance_to_point,
    sub,
    sub_point_from_arc,
    wedge_contains_point,
)
from arcglyph.core.geometry import (
    Line,
    nearest_point_on_segment,
    segment_distance_to_point,
    segment_span_contains,
    segment_sub,
)
from arcglyph.core.path import ArcCommands, arc_to_svg_a, to_arc_cmds
from arcglyph.core.sdf import endpoint_list_extents, iter_arcs, sdf_from_endpoints

__all__ = [
    # Approximation
    "D_BITS",
    "MAX_D",
    "ArcAccumulator",
    # Path reconstruction
    "ArcCommands",
    # Geometry
    "Line",
    "QuantizedArcApproximator",
    "approximate_bezier",
    "approximate_bezier_with_arcs",
    "arc_from_bezier_two_part",
    "arc_to_svg_a",
    "bezier_arc_error",
    # Distance
    "distance_to_point",
    "endpoint_list_extents",
    "extended_dist",
    "extents",
    "iter_arcs",
    "max_deviation",
    "nearest_point_on_segment",
    "sdf_from_endpoints",
    "segment_distance_to_point",
    "segment_span_contains",
    "segment_sub",
    "signed_distance_to_point",
    "squared_distance_to_point",
    "sub",
    "sub_point_from_arc",
    "to_arc_cmds",
    "wedge_contains_point",
]
