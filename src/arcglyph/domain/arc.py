"""Circular arc representation and arc endpoint types.

An arc is stored as its two endpoints plus a signed scalar d = tan(theta / 4),
where theta is the angle subtended at the circle's center:

- |d| < 1: small arc (theta < pi)
- |d| == 1: half circle
- |d| > 1: large arc (theta > pi)
- d == 0: straight segment from p0 to p1

The sign of d tells on which side of the chord the center lies: for d > 0 the
center is along (p1 - p0).orthogonal(), for d < 0 it is on the opposite side.
Center and radius are always derived, never stored.
"""

import math
from dataclasses import dataclass, replace
from typing import Any

from arcglyph.domain.point import INFINITY, Point, float_equals

# Below this |d| an arc is treated as a straight segment by distance queries
DEGENERATE_D = 1e-5


def sin2atan(d: float) -> float:
    """sin(2 * atan(d))."""
    if math.isinf(d):
        return 0.0
    return 2.0 * d / (1.0 + d * d)


def cos2atan(d: float) -> float:
    """cos(2 * atan(d))."""
    if math.isinf(d):
        return -1.0
    return (1.0 - d * d) / (1.0 + d * d)


def tan2atan(d: float) -> float:
    """tan(2 * atan(d)).

    Returns a signed infinity for the half circle (|d| == 1).
    """
    denominator = 1.0 - d * d
    if denominator == 0.0:
        return math.copysign(INFINITY, d)
    return 2.0 * d / denominator


@dataclass(frozen=True, slots=True, eq=False)
class Arc:
    """A circular arc between two points.

    Attributes:
        p0: Start point
        p1: End point
        d: Signed curvature parameter, tan(theta / 4)
    """

    p0: Point
    p1: Point
    d: float

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arc):
            return NotImplemented
        return (
            self.p0.equals(other.p0)
            and self.p1.equals(other.p1)
            and float_equals(self.d, other.d)
        )

    @classmethod
    def from_points(cls, p0: Point, p1: Point, pm: Point, complement: bool = False) -> "Arc":
        """Build the arc from p0 to p1 passing through pm.

        Args:
            p0: Start point
            p1: End point
            pm: A third point on the circle
            complement: Build the complementary arc (the other part of the circle)

        Returns:
            Arc through the three points; a straight segment if pm coincides
            with either endpoint
        """
        d = 0.0
        if not p0.equals(pm) and not p1.equals(pm):
            v = p1 - pm
            u = p0 - pm
            offset = 0.0 if complement else math.pi / 2.0
            d = math.tan((v.angle() - u.angle()) / 2.0 - offset)
        return cls(p0, p1, d)

    @classmethod
    def from_center_radius_angle(
        cls,
        center: Point,
        radius: float,
        a0: float,
        a1: float,
        complement: bool = False,
    ) -> "Arc":
        """Build an arc on the given circle from angle a0 to angle a1 (radians)."""
        p0 = center + Point(math.cos(a0), math.sin(a0)) * radius
        p1 = center + Point(math.cos(a1), math.sin(a1)) * radius
        offset = 0.0 if complement else math.pi / 2.0
        return cls(p0, p1, math.tan((a1 - a0) / 4.0 - offset))

    def is_degenerate(self, threshold: float = DEGENERATE_D) -> bool:
        """True if the arc is close enough to straight to be treated as a segment."""
        return abs(self.d) < threshold

    def is_large(self) -> bool:
        """True if the arc subtends more than half a circle."""
        return abs(self.d) > 1.0

    def radius(self) -> float:
        """Radius of the supporting circle (infinite for a straight segment)."""
        if self.d == 0.0:
            return INFINITY
        if math.isinf(self.d):
            return (self.p1 - self.p0).length() / 2.0
        return abs((self.p1 - self.p0).length() / (2.0 * sin2atan(self.d)))

    def center(self) -> Point:
        """Center of the supporting circle.

        Uses orthogonal(p1 - p0) * (1 - d^2) / (4d), which equals
        1 / (2 * tan2atan(d)) but stays finite for the half circle.
        A straight segment has its center at infinity.
        """
        if self.d == 0.0:
            return Point(INFINITY, INFINITY)
        if math.isinf(self.d):
            return self.p0.midpoint(self.p1)
        factor = (1.0 - self.d * self.d) / (4.0 * self.d)
        return self.p0.midpoint(self.p1) + (self.p1 - self.p0).orthogonal() * factor

    def tangents(self) -> tuple[Point, Point]:
        """Tangent vectors at the start and end points.

        Decomposes the tangent along the half chord and its perpendicular.
        The vectors are not normalized; only their direction is meaningful.

        Returns:
            Tuple of (start tangent, end tangent)
        """
        dp = (self.p1 - self.p0) * 0.5
        pp = dp.orthogonal() * -sin2atan(self.d)
        rdp = dp * cos2atan(self.d)
        return rdp + pp, rdp - pp

    def complement(self) -> "Arc":
        """The complementary arc, sharing endpoints, with d' = (1 + d) / (1 - d)."""
        if self.d == 1.0:
            return replace(self, d=INFINITY)
        return replace(self, d=(1.0 + self.d) / (1.0 - self.d))

    def with_d(self, d: float) -> "Arc":
        """Copy of this arc with a different curvature parameter."""
        return replace(self, d=d)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"p0": self.p0.to_dict(), "p1": self.p1.to_dict(), "d": self.d}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Arc":
        """Deserialize from dictionary."""
        return cls(Point.from_dict(data["p0"]), Point.from_dict(data["p1"]), data["d"])


@dataclass(frozen=True, slots=True)
class SignedVector:
    """A displacement plus the side of the boundary it originates from.

    Attributes:
        vector: Shortest displacement from the query point to the boundary
        negative: True if the query point lies on the negative side
    """

    vector: Point
    negative: bool

    def neg(self) -> "SignedVector":
        """Reverse the displacement and flip the side."""
        return SignedVector(-self.vector, not self.negative)

    def length(self) -> float:
        """Magnitude of the displacement."""
        return self.vector.length()


@dataclass(frozen=True, slots=True)
class Endpoint:
    """One entry of an arc endpoint sequence.

    Attributes:
        x: X coordinate
        y: Y coordinate
        d: Curvature of the arc arriving at this point from the previous
            endpoint; INFINITY marks the start of a new sub-path
    """

    x: float
    y: float
    d: float

    @property
    def point(self) -> Point:
        """Position as a Point."""
        return Point(self.x, self.y)

    def is_move(self) -> bool:
        """True if this endpoint starts a new sub-path."""
        return self.d == INFINITY

    def is_line(self) -> bool:
        """True if the arriving segment is straight."""
        return self.d == 0.0

    def transformed(
        self,
        scale: float = 1.0,
        dx: float = 0.0,
        dy: float = 0.0,
        flip_y: bool = False,
    ) -> "Endpoint":
        """Scale, optionally mirror vertically, then translate.

        Mirroring reverses orientation, so the sign of a finite d flips too.

        Args:
            scale: Uniform scale factor (must be positive)
            dx: Translation along x applied after scaling
            dy: Translation along y applied after scaling
            flip_y: Mirror the y axis (font space to screen space)

        Returns:
            Transformed endpoint
        """
        y = -self.y if flip_y else self.y
        d = -self.d if flip_y and not self.is_move() else self.d
        return Endpoint(self.x * scale + dx, y * scale + dy, d)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to (x, y, d) tuple."""
        return (self.x, self.y, self.d)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y, "d": self.d}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Endpoint":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], d=data["d"])

