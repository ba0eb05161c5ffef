"""Build arc endpoint sequences from path drawing commands.

ArcAccumulator receives move/line/quadratic/cubic commands (typically from a
fontTools pen) and emits the endpoint sequence consumed by the rest of the
package: straight segments become d = 0 endpoints, curves are approximated
by arcs, and each sub-path starts with a d = INFINITY endpoint.
"""

from arcglyph.core.approximation import (
    D_BITS,
    MAX_D,
    QuantizedArcApproximator,
    approximate_bezier_with_arcs,
)
from arcglyph.domain import INFINITY, Bezier, Endpoint, Point


class ArcAccumulator:
    """Accumulates drawing commands into an arc endpoint sequence.

    Move commands are emitted lazily, only once a segment follows them, so
    empty sub-paths leave no trace in the output.

    Example:
        acc = ArcAccumulator(tolerance=1.0)
        acc.move_to(Point(0, 0))
        acc.cubic_to(Point(0, 50), Point(50, 100), Point(100, 100))
        acc.close_path()
        endpoints = acc.result
    """

    def __init__(
        self,
        tolerance: float = 5e-4,
        max_d: float = MAX_D,
        d_bits: int = D_BITS,
        max_segments: int = 100,
    ) -> None:
        """Initialize the accumulator.

        Args:
            tolerance: Maximum curve approximation error, in input units
            max_d: Largest |d| emitted for curve arcs
            d_bits: Bits used to quantize d of curve arcs
            max_segments: Upper bound on arcs per curve
        """
        self.tolerance = tolerance
        self.max_segments = max_segments
        self._approximator = QuantizedArcApproximator(max_d=max_d, d_bits=d_bits)
        self.result: list[Endpoint] = []
        self.reset()

    def reset(self) -> None:
        """Reset the pen state (the accumulated result is kept)."""
        self.current_point = Point(0.0, 0.0)
        self.start_point = self.current_point
        self.need_moveto = True
        self.num_endpoints = 0
        self.max_error = 0.0

    def move_to(self, p: Point) -> None:
        """Start a new sub-path at p."""
        if self.num_endpoints != 0 or not p.equals(self.current_point):
            self._accumulate(p, INFINITY)

    def line_to(self, p: Point) -> None:
        """Straight segment to p."""
        self.arc_to(p, 0.0)

    def arc_to(self, p: Point, d: float) -> None:
        """Arc with curvature d to p."""
        self._accumulate(p, d)

    def conic_to(self, control: Point, p: Point) -> None:
        """Quadratic Bezier to p, elevated to a cubic.

        The cubic controls are q1 = p0 + 2/3 (c - p0) and q2 = p + 2/3 (c - p).
        """
        self.bezier(
            Bezier(
                self.current_point,
                self.current_point.lerp(control, 2.0 / 3.0),
                p.lerp(control, 2.0 / 3.0),
                p,
            )
        )

    def cubic_to(self, c1: Point, c2: Point, p: Point) -> None:
        """Cubic Bezier to p."""
        self.bezier(Bezier(self.current_point, c1, c2, p))

    def close_path(self) -> None:
        """Close the current sub-path with a straight segment if needed."""
        if not self.need_moveto and not self.current_point.equals(self.start_point):
            self.arc_to(self.start_point, 0.0)
        # The next segment opens a new sub-path even if it starts here
        self.need_moveto = True

    def bezier(self, b: Bezier) -> None:
        """Approximate a cubic with arcs and append them."""
        arcs, error = approximate_bezier_with_arcs(
            b, self.tolerance, self._approximator, self.max_segments
        )
        self.max_error = max(self.max_error, error)

        self.move_to(b.p0)
        for arc in arcs:
            self.arc_to(arc.p1, arc.d)

    def _emit(self, p: Point, d: float) -> None:
        self.result.append(Endpoint(p.x, p.y, d))
        self.num_endpoints += 1
        self.current_point = p

    def _accumulate(self, p: Point, d: float) -> None:
        if p.equals(self.current_point):
            return

        if d == INFINITY:
            self.need_moveto = True
            self.current_point = p
            return

        if self.need_moveto:
            self._emit(self.current_point, INFINITY)
            self.start_point = self.current_point
            self.need_moveto = False

        self._emit(p, d)
