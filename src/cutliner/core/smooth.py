"""Iterative [1 2 1]/4 corner cutting over a closed polygon."""

from cutliner.domain import Point, Polygon
from cutliner.exceptions import InvalidParameterError

DEFAULT_ITERATIONS = 2


def smooth_polygon(polygon: Polygon, iterations: int = DEFAULT_ITERATIONS) -> Polygon:
    """Smooth a closed polygon with a binomial low-pass filter.

    Each pass replaces every vertex by ``(prev + 2 * curr + next) / 4`` with
    wrap-around neighbours. Every pass reads the previous pass's vertices
    and writes a fresh list, so update order has no effect.

    Args:
        polygon: Closed polygon
        iterations: Number of passes (0 returns an unchanged copy)

    Returns:
        New polygon with the same number of points

    Raises:
        InvalidParameterError: If iterations is negative
    """
    if iterations < 0:
        raise InvalidParameterError("smooth_iterations", iterations, "must be >= 0")

    smoothed = list(polygon.points)
    n = len(smoothed)
    if n == 0:
        return Polygon(points=smoothed)

    for _ in range(iterations):
        new_points: list[Point] = []
        for i in range(n):
            prev = smoothed[(i - 1) % n]
            curr = smoothed[i]
            nxt = smoothed[(i + 1) % n]
            new_points.append(
                Point(
                    (prev.x + curr.x * 2 + nxt.x) / 4,
                    (prev.y + curr.y * 2 + nxt.y) / 4,
                )
            )
        smoothed = new_points

    return Polygon(points=smoothed)
