"""2D point and free-vector algebra.

This module defines the Point type used throughout arcglyph both as a position
and as a free vector. All operations are pure and return new values.

Equality between points uses a fixed absolute tolerance (EPSILON) rather than
exact floating point comparison. Tolerant equality is not transitive, so points
are deliberately unhashable.
"""

import math
from dataclasses import dataclass
from typing import Any

from arcglyph.exceptions import DegenerateVectorError

# Absolute tolerance for point and scalar equality
EPSILON = 1e-4

INFINITY = math.inf


def float_equals(a: float, b: float, tolerance: float = EPSILON) -> bool:
    """Compare two floats with an absolute tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Maximum absolute difference considered equal

    Returns:
        True if |a - b| < tolerance
    """
    return abs(a - b) < tolerance


def is_zero(value: float, tolerance: float = EPSILON * 2.0) -> bool:
    """Check whether a value is zero within tolerance."""
    return float_equals(value, 0.0, tolerance)


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """A point (or free vector) in 2D space.

    Immutable. Uses slots since arcs and endpoint lists create many of these.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.subtract(other)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Point":
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def equals(self, other: "Point", tolerance: float = EPSILON) -> bool:
        """Compare with another point component-wise within tolerance."""
        return float_equals(self.x, other.x, tolerance) and float_equals(
            self.y, other.y, tolerance
        )

    def add(self, other: "Point") -> "Point":
        """Component-wise sum."""
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Point") -> "Point":
        """Component-wise difference (self - other)."""
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        """Multiply both components by a scalar."""
        return Point(self.x * factor, self.y * factor)

    def dot(self, other: "Point") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Scalar 2D cross product (x1*y2 - y1*x2)."""
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Point":
        """Return the unit vector with the same direction.

        Raises:
            DegenerateVectorError: If the vector has zero length
        """
        length = self.length()
        if length == 0.0:
            raise DegenerateVectorError("normalize")
        return Point(self.x / length, self.y / length)

    def orthogonal(self) -> "Point":
        """Rotate 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
        return Point(-self.y, self.x)

    def angle(self) -> float:
        """Direction angle in radians, atan2(y, x)."""
        return math.atan2(self.y, self.x)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linear interpolation from self (t=0) to other (t=1).

        The endpoints are returned unchanged at exactly t=0 and t=1 so that
        repeated interpolation does not drift away from them.
        """
        if t == 0.0:
            return self
        if t == 1.0:
            return other
        return Point((1.0 - t) * self.x + t * other.x, (1.0 - t) * self.y + t * other.y)

    def midpoint(self, other: "Point") -> "Point":
        """Point halfway between self and other."""
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def squared_distance_to(self, other: "Point") -> float:
        """Squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def rebase(self, bx: "Point", by: "Point") -> "Point":
        """Express this vector in the basis (bx, by) by projection."""
        return Point(self.dot(bx), self.dot(by))

    def rebase_other(self, axis: "Point") -> "Point":
        """Express this vector in the basis (axis, axis rotated 90 degrees)."""
        return self.rebase(axis, axis.orthogonal())

    def is_infinite(self) -> bool:
        """True if either coordinate is infinite."""
        return math.isinf(self.x) or math.isinf(self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


# Free vectors share the point representation
Vector = Point

ORIGIN = Point(0.0, 0.0)
