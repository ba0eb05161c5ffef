"""Domain models for arcglyph.

This module contains the value types of the arc geometry kernel and the glyph
outline types exchanged with worker processes. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of fonttools implementation details

Key classes:
- Point: A 2D point or free vector with tolerant equality
- Arc: A circular arc given by two endpoints and d = tan(theta / 4)
- SignedVector: A displacement plus a boundary side flag
- Endpoint: One entry of an arc endpoint sequence
- Bezier: A cubic Bezier curve
- Extent: Axis-aligned bounding box accumulator
- GlyphOutline: Recorded pen operations of a glyph
"""

from arcglyph.domain.arc import (
    DEGENERATE_D,
    Arc,
    Endpoint,
    SignedVector,
    cos2atan,
    sin2atan,
    tan2atan,
)
from arcglyph.domain.bezier import Bezier
from arcglyph.domain.extent import Extent
from arcglyph.domain.glyph import GlyphMetadata, GlyphOutline, PenRecording
from arcglyph.domain.point import EPSILON, INFINITY, ORIGIN, Point, Vector, float_equals, is_zero

__all__: list[str] = [
    # Constants
    "DEGENERATE_D",
    "EPSILON",
    "INFINITY",
    "ORIGIN",
    # Core types
    "Arc",
    "Bezier",
    "Endpoint",
    "Extent",
    "GlyphMetadata",
    "GlyphOutline",
    "PenRecording",
    "Point",
    "SignedVector",
    "Vector",
    # Formulas
    "cos2atan",
    "float_equals",
    "is_zero",
    "sin2atan",
    "tan2atan",
]
