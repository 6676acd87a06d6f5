"""Unit tests for contour extraction."""

import pytest

from cutliner.core.contour import ContourExtractor, convex_hull, find_edge_pixels
from cutliner.domain import PixelBuffer, Point


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def make_buffer(width: int, height: int, opaque: set[tuple[int, int]]) -> PixelBuffer:
    """Create a buffer whose listed pixels are fully opaque."""
    rows = [
        [255 if (x, y) in opaque else 0 for x in range(width)]
        for y in range(height)
    ]
    return PixelBuffer.from_alpha_rows(rows)


@pytest.fixture
def blob_buffer() -> PixelBuffer:
    """An irregular, concave opaque shape (an L with a notch)."""
    opaque = {(x, y) for x in range(3, 20) for y in range(2, 8)}
    opaque |= {(x, y) for x in range(3, 9) for y in range(8, 22)}
    opaque -= {(12, 2), (13, 2), (12, 3)}
    return make_buffer(24, 24, opaque)


class TestFindEdgePixels:
    """Tests for edge pixel detection."""

    def test_solid_block_interior_excluded(self) -> None:
        """Test only the border of a solid block is reported."""
        buffer = make_buffer(3, 3, {(x, y) for x in range(3) for y in range(3)})
        edges = find_edge_pixels(buffer)
        assert len(edges) == 8
        assert Point(1, 1) not in edges

    def test_buffer_border_counts_as_transparent(self) -> None:
        """Test opaque pixels on the buffer border are edge pixels."""
        buffer = make_buffer(5, 5, {(x, y) for x in range(5) for y in range(5)})
        edges = set(find_edge_pixels(buffer))
        assert Point(0, 2) in edges
        assert Point(4, 4) in edges
        assert Point(2, 2) not in edges

    def test_threshold(self) -> None:
        """Test alpha at the threshold is opaque and below it is not."""
        buffer = PixelBuffer.from_alpha_rows([[127, 128]])
        assert find_edge_pixels(buffer) == [Point(1, 0)]
        assert find_edge_pixels(buffer, threshold=127) == [Point(0, 0), Point(1, 0)]

    def test_zero_threshold_keeps_border(self) -> None:
        """Test with threshold 0 every pixel is opaque but only the border is an edge."""
        buffer = make_buffer(4, 4, set())
        edges = set(find_edge_pixels(buffer, threshold=0))
        assert len(edges) == 12
        assert Point(1, 1) not in edges
        assert Point(0, 0) in edges

    def test_transparent(self) -> None:
        """Test a transparent buffer has no edge pixels."""
        assert find_edge_pixels(make_buffer(4, 4, set())) == []


class TestConvexHull:
    """Tests for Andrew's monotone chain."""

    def test_square_drops_interior_and_collinear(self) -> None:
        """Test interior and collinear boundary points are dropped."""
        points = [Point(0, 0), Point(0, 2), Point(1, 0), Point(1, 1), Point(2, 0), Point(2, 2)]
        hull = convex_hull(points)
        assert hull == [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]

    def test_fewer_than_three_points(self) -> None:
        """Test tiny inputs are returned as-is."""
        assert convex_hull([Point(3, 3)]) == [Point(3, 3)]
        assert convex_hull([]) == []

    def test_collinear_points(self) -> None:
        """Test a line collapses to its two endpoints."""
        points = [Point(x, 4) for x in range(6)]
        assert convex_hull(points) == [Point(0, 4), Point(5, 4)]

    def test_does_not_modify_input(self) -> None:
        """Test the input list is not reordered."""
        points = [Point(2, 2), Point(0, 0), Point(2, 0), Point(0, 2)]
        original = list(points)
        convex_hull(points)
        assert points == original


class TestContourExtractor:
    """Tests for ContourExtractor."""

    def test_transparent_buffer(self) -> None:
        """Test a fully transparent buffer yields no contour."""
        assert ContourExtractor().extract(make_buffer(10, 10, set())) == []

    def test_single_contour_counter_clockwise(self) -> None:
        """Test a block yields one counter-clockwise contour of its corners."""
        buffer = make_buffer(6, 6, {(x, y) for x in range(1, 4) for y in range(1, 4)})
        contours = ContourExtractor().extract(buffer)

        assert len(contours) == 1
        hull = contours[0]
        assert set(hull.points) == {Point(1, 1), Point(3, 1), Point(3, 3), Point(1, 3)}
        assert hull.is_counter_clockwise()

    def test_single_pixel_is_degenerate(self) -> None:
        """Test a lone opaque pixel yields a one-point contour."""
        contours = ContourExtractor().extract(make_buffer(20, 20, {(10, 10)}))
        assert len(contours) == 1
        assert contours[0].points == [Point(10, 10)]

    def test_concavity_is_discarded(self, blob_buffer: PixelBuffer) -> None:
        """Test the notch and inner corner of an L are bridged by the hull."""
        hull = ContourExtractor().extract(blob_buffer)[0]
        assert hull.contains_point(11, 11)
        assert hull.contains_point(12.5, 2.5)

    def test_edge_pixels_inside_hull(self, blob_buffer: PixelBuffer) -> None:
        """Test every edge pixel lies inside or on the hull."""
        hull = ContourExtractor().extract(blob_buffer)[0].points
        n = len(hull)
        for p in find_edge_pixels(blob_buffer):
            for i in range(n):
                # Counter-clockwise on screen: interior is on the non-positive side
                assert _cross(hull[i], hull[(i + 1) % n], p) <= 1e-9

    def test_alpha_threshold_setting(self) -> None:
        """Test the extractor honours its threshold."""
        buffer = PixelBuffer.from_alpha_rows([[100] * 5] * 5)
        assert ContourExtractor().extract(buffer) == []
        assert len(ContourExtractor(alpha_threshold=100).extract(buffer)) == 1

    def test_disjoint_regions_share_one_hull(self) -> None:
        """Test two separate blobs produce one enclosing contour."""
        opaque = {(x, y) for x in range(2, 6) for y in range(2, 6)}
        opaque |= {(x, y) for x in range(14, 18) for y in range(10, 14)}
        contours = ContourExtractor().extract(make_buffer(20, 16, opaque))

        assert len(contours) == 1
        assert contours[0].contains_point(3.5, 3.5)
        assert contours[0].contains_point(15.5, 11.5)
        assert contours[0].contains_point(10, 8)
