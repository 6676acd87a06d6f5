"""Core geometric types for cut line representation.

This module defines the fundamental geometric types used throughout cutliner:
- Point: A 2D point in pixels
- Polygon: A closed loop of points (the closing edge is implicit)
- WindingDirection: Enum for polygon winding as seen on screen

Coordinates live in the image frame: x grows to the right and y grows
downwards, as in the pixel buffer.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator


class WindingDirection(Enum):
    """Polygon winding direction as seen on screen (y axis pointing down).

    Because the y axis points down, a counter-clockwise polygon has a
    negative shoelace sum. Cut lines are emitted counter-clockwise so that
    the left-hand edge normal faces outward.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in pixels
        y: Y coordinate in pixels
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass
class Polygon:
    """A closed polygon.

    The last point connects back to the first implicitly; the first point
    is never repeated at the end. A polygon needs at least 3 points to
    enclose any area.

    Attributes:
        points: Ordered list of vertices
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Positive for clockwise winding on screen, negative for
        counter-clockwise (the y axis points down).

        Returns:
            Signed area in square pixels, 0.0 for fewer than 3 points
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    def area(self) -> float:
        """Enclosed area, independent of winding."""
        return abs(self.signed_area())

    @property
    def direction(self) -> WindingDirection | None:
        """Winding direction on screen, None for degenerate polygons."""
        area = self.signed_area()
        if area < 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area > 0:
            return WindingDirection.CLOCKWISE
        return None

    def is_counter_clockwise(self) -> bool:
        """Check whether the polygon winds counter-clockwise on screen."""
        return self.direction == WindingDirection.COUNTER_CLOCKWISE

    def reversed(self) -> "Polygon":
        """Return a copy with the opposite winding."""
        return Polygon(points=list(reversed(self.points)))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is inside the polygon using ray casting.

        Points exactly on an edge may be reported either way.

        Args:
            x: X coordinate of point to test
            y: Y coordinate of point to test

        Returns:
            True if point is inside polygon, False otherwise
        """
        n = len(self.points)
        if n < 3:
            return False

        inside = False
        j = n - 1

        for i in range(n):
            xi, yi = self.points[i].x, self.points[i].y
            xj, yj = self.points[j].x, self.points[j].y

            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside

            j = i

        return inside

    def distinct_count(self) -> int:
        """Number of distinct vertices."""
        return len(set(self.points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(points=[Point.from_dict(p) for p in data["points"]])
