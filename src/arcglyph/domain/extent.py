"""Axis-aligned bounding extent accumulator."""

from dataclasses import dataclass

from arcglyph.domain.point import INFINITY, Point


@dataclass
class Extent:
    """Mutable axis-aligned bounding box.

    An extent is empty until the first point is added. It is owned by the
    caller of a single extents computation and must not be shared between
    concurrent computations.

    Attributes:
        min_x: Minimum x coordinate
        min_y: Minimum y coordinate
        max_x: Maximum x coordinate
        max_y: Maximum y coordinate
    """

    min_x: float = INFINITY
    min_y: float = INFINITY
    max_x: float = INFINITY
    max_y: float = INFINITY

    def clear(self) -> None:
        """Reset to the empty extent."""
        self.min_x = self.min_y = INFINITY
        self.max_x = self.max_y = INFINITY

    def is_empty(self) -> bool:
        """True if no point has been added since the last clear."""
        return self.min_x in (INFINITY, -INFINITY)

    def add(self, p: Point) -> None:
        """Grow the extent to include a point."""
        if self.is_empty():
            self.min_x = self.max_x = p.x
            self.min_y = self.max_y = p.y
            return

        self.min_x = min(self.min_x, p.x)
        self.min_y = min(self.min_y, p.y)
        self.max_x = max(self.max_x, p.x)
        self.max_y = max(self.max_y, p.y)

    def extend(self, other: "Extent") -> None:
        """Grow the extent to include another extent."""
        if other.is_empty():
            return
        if self.is_empty():
            self.min_x, self.min_y = other.min_x, other.min_y
            self.max_x, self.max_y = other.max_x, other.max_y
            return

        self.min_x = min(self.min_x, other.min_x)
        self.min_y = min(self.min_y, other.min_y)
        self.max_x = max(self.max_x, other.max_x)
        self.max_y = max(self.max_y, other.max_y)

    def includes(self, p: Point) -> bool:
        """True if the point lies inside or on the boundary."""
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    @property
    def width(self) -> float:
        """Width, zero when empty."""
        return 0.0 if self.is_empty() else self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Height, zero when empty."""
        return 0.0 if self.is_empty() else self.max_y - self.min_y

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
