"""Cubic Bezier curve type.

Evaluation and subdivision use De Casteljau's algorithm built on Point.lerp,
so evaluating at t=0 and t=1 returns the endpoints exactly.
"""

from dataclasses import dataclass

from arcglyph.domain.point import Point


@dataclass(frozen=True, slots=True)
class Bezier:
    """A cubic Bezier curve.

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    def point(self, t: float) -> Point:
        """Evaluate the curve at parameter t."""
        p01 = self.p0.lerp(self.p1, t)
        p12 = self.p1.lerp(self.p2, t)
        p23 = self.p2.lerp(self.p3, t)

        p012 = p01.lerp(p12, t)
        p123 = p12.lerp(p23, t)

        return p012.lerp(p123, t)

    def midpoint(self) -> Point:
        """Evaluate the curve at t=0.5 using exact midpoints."""
        p01 = self.p0.midpoint(self.p1)
        p12 = self.p1.midpoint(self.p2)
        p23 = self.p2.midpoint(self.p3)

        p012 = p01.midpoint(p12)
        p123 = p12.midpoint(p23)

        return p012.midpoint(p123)

    def tangent(self, t: float) -> Point:
        """First derivative at parameter t."""
        t_2_0 = t * t
        t_0_2 = (1.0 - t) * (1.0 - t)

        a = 1.0 - 4.0 * t + 3.0 * t_2_0
        b = 2.0 * t - 3.0 * t_2_0

        return Point(
            -3.0 * self.p0.x * t_0_2 + 3.0 * self.p1.x * a + 3.0 * self.p2.x * b
            + 3.0 * self.p3.x * t_2_0,
            -3.0 * self.p0.y * t_0_2 + 3.0 * self.p1.y * a + 3.0 * self.p2.y * b
            + 3.0 * self.p3.y * t_2_0,
        )

    def d_tangent(self, t: float) -> Point:
        """Second derivative at parameter t."""
        return Point(
            6.0 * ((-self.p0.x + 3.0 * self.p1.x - 3.0 * self.p2.x + self.p3.x) * t
                   + (self.p0.x - 2.0 * self.p1.x + self.p2.x)),
            6.0 * ((-self.p0.y + 3.0 * self.p1.y - 3.0 * self.p2.y + self.p3.y) * t
                   + (self.p0.y - 2.0 * self.p1.y + self.p2.y)),
        )

    def curvature(self, t: float) -> float:
        """Signed curvature at parameter t."""
        dpp = self.tangent(t).orthogonal()
        ddp = self.d_tangent(t)
        length = dpp.length()
        return dpp.dot(ddp) / (length * length * length)

    def split(self, t: float) -> tuple["Bezier", "Bezier"]:
        """Split into two curves at parameter t."""
        p01 = self.p0.lerp(self.p1, t)
        p12 = self.p1.lerp(self.p2, t)
        p23 = self.p2.lerp(self.p3, t)
        p012 = p01.lerp(p12, t)
        p123 = p12.lerp(p23, t)
        p0123 = p012.lerp(p123, t)

        return (
            Bezier(self.p0, p01, p012, p0123),
            Bezier(p0123, p123, p23, self.p3),
        )

    def halve(self) -> tuple["Bezier", "Bezier"]:
        """Split into two curves at t=0.5."""
        p01 = self.p0.midpoint(self.p1)
        p12 = self.p1.midpoint(self.p2)
        p23 = self.p2.midpoint(self.p3)
        p012 = p01.midpoint(p12)
        p123 = p12.midpoint(p23)
        p0123 = p012.midpoint(p123)

        return (
            Bezier(self.p0, p01, p012, p0123),
            Bezier(p0123, p123, p23, self.p3),
        )

    def segment(self, t0: float, t1: float) -> "Bezier":
        """The part of the curve between parameters t0 < t1.

        Requires t0 < 1 and t1 > 0.
        """
        p01 = self.p0.lerp(self.p1, t0)
        p12 = self.p1.lerp(self.p2, t0)
        p23 = self.p2.lerp(self.p3, t0)
        p012 = p01.lerp(p12, t0)
        p123 = p12.lerp(p23, t0)
        p0123 = p012.lerp(p123, t0)

        q01 = self.p0.lerp(self.p1, t1)
        q12 = self.p1.lerp(self.p2, t1)
        q23 = self.p2.lerp(self.p3, t1)
        q012 = q01.lerp(q12, t1)
        q123 = q12.lerp(q23, t1)
        q0123 = q012.lerp(q123, t1)

        return Bezier(
            p0123,
            p0123 + (p123 - p0123) * ((t1 - t0) / (1.0 - t0)),
            q0123 + (q012 - q0123) * ((t1 - t0) / t1),
            q0123,
        )

    def to_tuple(self) -> tuple[Point, Point, Point, Point]:
        """Control points as a tuple."""
        return (self.p0, self.p1, self.p2, self.p3)
