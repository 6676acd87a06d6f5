"""Douglas-Peucker polyline simplification.

The polygon is treated as an open polyline from its first to its last
point; both endpoints are always kept. The reduction runs on an explicit
work stack so very long contours cannot exhaust the recursion limit.
"""

import math

from cutliner.domain import Point, Polygon


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from a point to the infinite line through two points.

    Falls back to the Euclidean distance to ``line_start`` when the two
    line points coincide.

    Args:
        point: The point to measure
        line_start: First point on the line
        line_end: Second point on the line

    Returns:
        Non-negative distance in pixels

    Examples:
        >>> perpendicular_distance(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    norm = math.sqrt(dx * dx + dy * dy)

    if norm == 0:
        return math.hypot(point.x - line_start.x, point.y - line_start.y)

    return (
        abs(dy * point.x - dx * point.y + line_end.x * line_start.y - line_end.y * line_start.x)
        / norm
    )


def douglas_peucker(points: list[Point], epsilon: float) -> list[Point]:
    """Reduce a polyline with the Douglas-Peucker algorithm.

    For each span the point farthest from the chord is found (the first
    one on ties). If its distance exceeds ``epsilon`` the span is split
    there and both halves are processed; otherwise only the span's
    endpoints survive.

    Args:
        points: Polyline vertices
        epsilon: Tolerance in pixels

    Returns:
        Kept vertices in their original order; inputs with fewer than 3
        points are returned as a copy
    """
    n = len(points)
    if n < 3:
        return list(points)

    keep = [False] * n
    keep[0] = keep[n - 1] = True

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        dmax = 0.0
        index = start
        for i in range(start + 1, end):
            d = perpendicular_distance(points[i], points[start], points[end])
            if d > dmax:
                index = i
                dmax = d

        if dmax > epsilon:
            keep[index] = True
            stack.append((index, end))
            stack.append((start, index))

    return [p for p, kept in zip(points, keep) if kept]


def simplify_polygon(polygon: Polygon, tolerance: float) -> Polygon:
    """Simplify a polygon's vertex list with Douglas-Peucker.

    Args:
        polygon: Polygon to simplify
        tolerance: Tolerance in pixels (the ``smoothness`` parameter)

    Returns:
        New polygon with no more points than the input
    """
    return Polygon(points=douglas_peucker(polygon.points, tolerance))
