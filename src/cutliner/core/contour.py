"""Alpha-mask contour extraction.

Turns the opaque region of an RGBA buffer into a single closed outline:

1. A pixel is opaque when its alpha is at or above the threshold.
2. An opaque pixel is an edge pixel when one of its 4-neighbours is
   transparent or outside the buffer.
3. The convex hull of the edge pixels (Andrew's monotone chain) is the
   contour.

Concavities and holes in the mask are discarded: a sticker gets exactly
one outer cut. Filtering to edge pixels first keeps the hull input
proportional to the perimeter rather than the area.
"""

import logging

from cutliner.domain import PixelBuffer, Point, Polygon

logger = logging.getLogger(__name__)

DEFAULT_ALPHA_THRESHOLD = 128


def find_edge_pixels(
    buffer: PixelBuffer, threshold: int = DEFAULT_ALPHA_THRESHOLD
) -> list[Point]:
    """Collect opaque pixels that touch a transparent 4-neighbour.

    Pixels outside the buffer count as transparent, so opaque pixels on
    the buffer border are always edge pixels.

    Args:
        buffer: Source pixels
        threshold: Alpha cut-off

    Returns:
        Edge pixels in row-major order
    """
    width, height = buffer.width, buffer.height

    def opaque(x: int, y: int) -> bool:
        # alpha() reads 0 off the buffer, which a threshold of 0 would accept
        if x < 0 or x >= width or y < 0 or y >= height:
            return False
        return buffer.alpha(x, y) >= threshold

    edges: list[Point] = []
    for y in range(height):
        for x in range(width):
            if not opaque(x, y):
                continue
            if not (
                opaque(x - 1, y)
                and opaque(x + 1, y)
                and opaque(x, y - 1)
                and opaque(x, y + 1)
            ):
                edges.append(Point(float(x), float(y)))
    return edges


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull(points: list[Point]) -> list[Point]:
    """Compute the convex hull using Andrew's monotone chain.

    Points are sorted by (x, y). Collinear points on the hull boundary are
    dropped. Inputs with fewer than 3 points are returned as a plain copy.

    The result has a positive shoelace sum, i.e. it winds clockwise on
    screen.

    Args:
        points: Input point set (not modified)

    Returns:
        Hull vertices without a repeated closing point
    """
    if len(points) < 3:
        return list(points)

    pts = sorted(points, key=lambda p: (p.x, p.y))

    lower: list[Point] = []
    for p in pts:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: list[Point] = []
    for p in reversed(pts):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    lower.pop()
    upper.pop()
    return lower + upper


class ContourExtractor:
    """Extracts the single enclosing contour of an image's opaque region.

    The extractor is stateless apart from its threshold and is safe for
    use in worker processes.
    """

    def __init__(self, alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD) -> None:
        """Initialize the extractor.

        Args:
            alpha_threshold: Alpha value at or above which a pixel is opaque
        """
        self.alpha_threshold = alpha_threshold

    def extract(self, buffer: PixelBuffer) -> list[Polygon]:
        """Extract at most one closed contour from the buffer.

        The contour winds counter-clockwise on screen so that positive
        offsets move it inward. Single pixels and collinear masks produce
        a degenerate polygon with fewer than 3 points.

        Args:
            buffer: Source pixels

        Returns:
            Empty list for a fully transparent buffer, otherwise one polygon
        """
        edges = find_edge_pixels(buffer, self.alpha_threshold)
        if not edges:
            logger.debug("No opaque pixels in %dx%d buffer", buffer.width, buffer.height)
            return []

        hull = Polygon(points=convex_hull(edges))
        if not hull.is_counter_clockwise() and len(hull) >= 3:
            hull = hull.reversed()

        logger.debug(
            "Contour extracted: %d edge pixels, %d hull points", len(edges), len(hull)
        )
        return [hull]
