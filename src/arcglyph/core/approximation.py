"""Conversions between circular arcs and cubic Bezier curves.

Arc to Bezier is closed form: approximate_bezier returns the cubic and an
analytic error bound.

Bezier to arcs is iterative: the curve is cut into n pieces, each piece is
fitted with one arc through its endpoints and midpoint, and the cut positions
are relaxed ("jiggled") like a spring system until every piece is within
tolerance or n reaches the segment limit.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from arcglyph.core.distance import wedge_contains_point
from arcglyph.domain import INFINITY, Arc, Bezier, Point, is_zero, tan2atan

logger = logging.getLogger(__name__)

# Largest |d| emitted when fitting arcs to curves
MAX_D = 0.5

# Bits used to quantize d
D_BITS = 8

ErrorApproximator = Callable[[Bezier, Arc], float]


def approximate_bezier(arc: Arc) -> tuple[Bezier, float]:
    """Approximate an arc with a single cubic Bezier.

    Args:
        arc: The arc to approximate

    Returns:
        Tuple of (bezier, error) where error bounds the distance between the
        curve and the true arc: |p1 - p0| * |d|^5 / (54 * (1 + d^2))
    """
    d = arc.d
    dp = arc.p1 - arc.p0
    pp = dp.orthogonal()

    error = dp.length() * abs(d) ** 5 / (54.0 * (1.0 + d * d))

    rdp = dp * ((1.0 - d * d) / 3.0)
    rpp = pp * (2.0 * d / 3.0)

    c0 = arc.p0 + rdp - rpp
    c1 = arc.p1 - rdp - rpp

    return Bezier(arc.p0, c0, c1, arc.p1), error


def max_deviation(d0: float, d1: float) -> float:
    """Return 3 * max |d0 t (1-t)^2 + d1 t^2 (1-t)| for 0 <= t <= 1."""
    candidates = [0.0, 1.0]
    if d0 == d1:
        candidates.append(0.5)
    else:
        delta = d0 * d0 - d0 * d1 + d1 * d1
        t2 = 1.0 / (3.0 * (d0 - d1))
        t0 = (2.0 * d0 - d1) * t2
        if delta == 0.0:
            candidates.append(t0)
        elif delta > 0.0:
            t1 = math.sqrt(delta) * t2
            candidates.extend((t0 - t1, t0 + t1))

    e = 0.0
    for t in candidates:
        if t < 0.0 or t > 1.0:
            continue
        e = max(e, abs(3.0 * t * (1.0 - t) * (d0 * (1.0 - t) + d1 * t)))
    return e


def bezier_arc_error(
    bezier: Bezier,
    arc: Arc,
    deviation: Callable[[float, float], float] = max_deviation,
) -> float:
    """Upper bound of the distance between a cubic and an arc sharing its endpoints.

    Compares the cubic with the arc's own Bezier approximation, measures the
    control point deviation along and across the chord, and adds the arc's
    Bezier error.

    Args:
        bezier: The curve
        arc: Arc with the same endpoints as the curve
        deviation: Maximum deviation estimator for the control point offsets

    Returns:
        Error bound in the curve's units
    """
    arc_bezier, arc_error = approximate_bezier(arc)

    v0 = arc_bezier.p1 - bezier.p1
    v1 = arc_bezier.p2 - bezier.p2

    chord = bezier.p3 - bezier.p0
    if chord.length_squared() == 0.0:
        return arc_error + math.hypot(
            deviation(v0.x, v1.x), deviation(v0.y, v1.y)
        )

    axis = chord.normalize()
    v0 = v0.rebase_other(axis)
    v1 = v1.rebase_other(axis)

    v = Point(deviation(v0.x, v1.x), deviation(v0.y, v1.y))

    # Too close to a half circle, use the weak bound
    if arc.d * arc.d > 1.0 - 1e-4:
        return arc_error + v.length()

    # Control points outside the wedge, use the weak bound
    if not wedge_contains_point(arc, bezier.p1) or not wedge_contains_point(arc, bezier.p2):
        return arc_error + v.length()

    # Straight line: the orthogonal deviation is the error
    if abs(arc.d) < 1e-6:
        return arc_error + v.y

    tan_half_alpha = abs(tan2atan(arc.d))
    tan_v = v.x / v.y if v.y != 0.0 else INFINITY

    if abs(tan_v) <= tan_half_alpha:
        return arc_error + v.length()

    c2 = (arc.p1 - arc.p0).length() * 0.5
    r = arc.radius()

    eb = Point(c2 + v.x, c2 / tan_half_alpha + v.y).length() - r
    return arc_error + eb


def arc_from_bezier_two_part(
    bezier: Bezier,
    mid_t: float = 0.5,
    error_approximator: ErrorApproximator = bezier_arc_error,
) -> tuple[Arc, float]:
    """Fit one arc through the curve's endpoints and its point at mid_t.

    The error is estimated separately for the two halves of the curve, each
    against the arc restricted to that half.

    Returns:
        Tuple of (arc, error)
    """
    first, second = bezier.split(mid_t)
    m = second.p0

    a0 = Arc.from_points(bezier.p0, m, bezier.p3, complement=True)
    a1 = Arc.from_points(m, bezier.p3, bezier.p0, complement=True)

    error = max(error_approximator(first, a0), error_approximator(second, a1))
    return Arc.from_points(bezier.p0, bezier.p3, m), error


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class QuantizedArcApproximator:
    """Fits one arc to a curve, clamping and quantizing its d.

    Attributes:
        max_d: Largest |d| allowed (INFINITY disables clamping)
        d_bits: Bits to quantize d into, values below 2 disable quantization
    """

    max_d: float = INFINITY
    d_bits: int = 0

    def approximate(
        self,
        bezier: Bezier,
        error_approximator: ErrorApproximator = bezier_arc_error,
    ) -> tuple[Arc, float]:
        """Approximate a curve with a single arc.

        Returns:
            Tuple of (arc, error bound including quantization error)
        """
        mid_t = 0.5
        orig = Arc.from_points(bezier.p0, bezier.p3, bezier.point(mid_t))
        d = orig.d

        if not math.isinf(self.max_d) and abs(d) > self.max_d:
            d = math.copysign(self.max_d, d)

        if self.d_bits > 1 and self.max_d != 0.0 and not math.isinf(self.max_d):
            mult = (1 << (self.d_bits - 1)) - 1
            d = _round_half_away(d / self.max_d * mult) * self.max_d / mult

        arc = orig.with_d(d)

        # Error introduced by quantization
        ed = abs(arc.d - orig.d) * (arc.p1 - arc.p0).length() * 0.5

        _, error = arc_from_bezier_two_part(bezier, mid_t, error_approximator)

        if ed != 0.0:
            error += ed
            # A direct fit against the quantized arc may be tighter
            error = min(error, error_approximator(bezier, arc))

        return arc, error


def _calc_arcs(
    bezier: Bezier,
    t: list[float],
    approximator: QuantizedArcApproximator,
) -> tuple[list[Arc], list[float]]:
    arcs: list[Arc] = []
    errors: list[float] = []
    for i in range(len(t) - 1):
        arc, error = approximator.approximate(bezier.segment(t[i], t[i + 1]))
        arcs.append(arc)
        errors.append(error)
    return arcs, errors


def _jiggle(
    bezier: Bezier,
    approximator: QuantizedArcApproximator,
    t: list[float],
    errors: list[float],
    tolerance: float,
) -> tuple[list[Arc], list[float]]:
    """Move the cut positions so that pieces with large error get shorter."""
    n = len(t) - 1
    conditioner = tolerance * 0.01
    max_jiggle = n.bit_length()
    arcs: list[Arc] = []

    for _ in range(max_jiggle):
        weights = [
            (t[i + 1] - t[i]) * (errors[i] + conditioner) ** -0.3 for i in range(n)
        ]
        total = sum(weights)
        for i in range(n):
            t[i + 1] = t[i] + weights[i] / total
        t[n] = 1.0

        arcs, errors = _calc_arcs(bezier, t, approximator)

        max_e = max(errors)
        min_e = min(errors)
        if max_e < tolerance or 2.0 * min_e - max_e > tolerance:
            break

    return arcs, errors


def approximate_bezier_with_arcs(
    bezier: Bezier,
    tolerance: float,
    approximator: QuantizedArcApproximator,
    max_segments: int = 100,
) -> tuple[list[Arc], float]:
    """Approximate a cubic with a chain of arcs within tolerance.

    Args:
        bezier: The curve
        tolerance: Maximum allowed error, in the curve's units
        approximator: Single-arc approximator used for each piece
        max_segments: Upper bound (exclusive) on the number of pieces

    Returns:
        Tuple of (arcs, max_error). Curves without area collapse to a single
        straight arc, or to nothing when their endpoints coincide.
    """
    v1 = bezier.p1 - bezier.p0
    v2 = bezier.p2 - bezier.p0
    v3 = bezier.p3 - bezier.p0
    if is_zero(v1.cross(v2)) and is_zero(v2.cross(v3)):
        if bezier.p0.equals(bezier.p3):
            return [], 0.0
        return [Arc(bezier.p0, bezier.p3, 0.0)], 0.0

    arcs: list[Arc] = []
    max_e = 0.0

    for n in range(1, max_segments):
        t = [i / n for i in range(n)] + [1.0]
        arcs, errors = _calc_arcs(bezier, t, approximator)

        if any(e <= tolerance for e in errors):
            arcs, errors = _jiggle(bezier, approximator, t, errors, tolerance)

        max_e = max(errors)
        if max_e <= tolerance:
            break
    else:
        logger.debug(
            "Curve not within tolerance after %d segments (error=%.4g, tolerance=%.4g)",
            max_segments - 1, max_e, tolerance
        )

    return arcs, max_e
