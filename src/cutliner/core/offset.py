"""Signed polygon offsetting with averaged edge normals.

Each vertex moves along the normalised mean of the left-hand unit normals
of its two incident edges. For a polygon winding counter-clockwise on
screen the left-hand normal faces outward, so a positive offset (which
subtracts the normal) shrinks the outline and a negative one grows it.

Sharp corners are under- or over-offset and no self-intersection repair
is done; offsets larger than half the shortest edge may produce
self-crossing outlines.
"""

import math

from cutliner.domain import Point, Polygon
from cutliner.units import mm_to_px


def left_normal(dx: float, dy: float) -> tuple[float, float]:
    """Left-hand unit normal of an edge vector, (0, 0) for a zero-length edge.

    Examples:
        >>> left_normal(1.0, 0.0)
        (-0.0, 1.0)
    """
    length = math.sqrt(dx * dx + dy * dy)
    if length > 0:
        return (-dy / length, dx / length)
    return (0.0, 0.0)


def offset_polygon_px(polygon: Polygon, distance_px: float) -> Polygon:
    """Offset a closed polygon by a signed distance in pixels.

    Vertices whose averaged normal vanishes (for example where the two
    incident edges point in opposite directions) are left in place.

    Args:
        polygon: Closed polygon
        distance_px: Signed distance; positive moves against the left normal

    Returns:
        New polygon with the same number of points. Polygons with fewer
        than 3 points are returned unchanged.
    """
    points = polygon.points
    n = len(points)
    if n < 3:
        return Polygon(points=list(points))

    result: list[Point] = []
    for i in range(n):
        prev = points[(i - 1) % n]
        curr = points[i]
        nxt = points[(i + 1) % n]

        n1x, n1y = left_normal(curr.x - prev.x, curr.y - prev.y)
        n2x, n2y = left_normal(nxt.x - curr.x, nxt.y - curr.y)

        nx = (n1x + n2x) / 2
        ny = (n1y + n2y) / 2
        nlen = math.sqrt(nx * nx + ny * ny)

        if nlen > 0:
            result.append(
                Point(
                    curr.x - (nx / nlen) * distance_px,
                    curr.y - (ny / nlen) * distance_px,
                )
            )
        else:
            result.append(curr)

    return Polygon(points=result)


def offset_polygon(polygon: Polygon, offset_mm: float) -> Polygon:
    """Offset a closed polygon by a signed distance in millimetres.

    Args:
        polygon: Closed polygon winding counter-clockwise on screen
        offset_mm: Positive = inside, negative = outside

    Returns:
        New polygon with the same number of points
    """
    return offset_polygon_px(polygon, mm_to_px(offset_mm))
