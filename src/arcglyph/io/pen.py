"""fontTools pen that converts glyph outlines to arc endpoint sequences."""

from typing import Any

from fontTools.pens.basePen import BasePen

from arcglyph.core.accumulator import ArcAccumulator
from arcglyph.core.approximation import D_BITS, MAX_D
from arcglyph.domain import Endpoint, Point


class ArcPen(BasePen):
    """A segment pen feeding an ArcAccumulator.

    BasePen decomposes TrueType quadratic splines (including implied on-curve
    points) into single quadratic segments, which are elevated to cubics and
    approximated with arcs.

    Example:
        pen = ArcPen(glyph_set, tolerance=10.0)
        glyph_set["a"].draw(pen)
        endpoints = pen.endpoints
    """

    def __init__(
        self,
        glyphSet: Any = None,
        tolerance: float = 5e-4,
        max_d: float = MAX_D,
        d_bits: int = D_BITS,
        max_segments: int = 100,
    ) -> None:
        """Initialize the pen.

        Args:
            glyphSet: Glyph set used to resolve components (may be None)
            tolerance: Maximum curve approximation error, in font units
            max_d: Largest |d| emitted for curve arcs
            d_bits: Bits used to quantize d of curve arcs
            max_segments: Upper bound on arcs per curve
        """
        super().__init__(glyphSet)
        self.accumulator = ArcAccumulator(
            tolerance=tolerance,
            max_d=max_d,
            d_bits=d_bits,
            max_segments=max_segments,
        )

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.accumulator.move_to(Point(*pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.accumulator.line_to(Point(*pt))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.accumulator.cubic_to(Point(*pt1), Point(*pt2), Point(*pt3))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.accumulator.conic_to(Point(*pt1), Point(*pt2))

    def _closePath(self) -> None:
        self.accumulator.close_path()

    def _endPath(self) -> None:
        # Open contours are left open
        pass

    @property
    def endpoints(self) -> list[Endpoint]:
        """Endpoint sequence drawn so far."""
        return list(self.accumulator.result)

    @property
    def max_error(self) -> float:
        """Largest curve approximation error so far."""
        return self.accumulator.max_error
