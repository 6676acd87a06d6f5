"""Unit tests for polygon offsetting."""

import math

import pytest

from cutliner.core.offset import left_normal, offset_polygon, offset_polygon_px
from cutliner.domain import Point, Polygon
from cutliner.units import MM_TO_PX, mm_to_px, px_to_mm


@pytest.fixture
def square() -> Polygon:
    """A 4x4 square winding counter-clockwise on screen."""
    return Polygon([Point(0, 4), Point(4, 4), Point(4, 0), Point(0, 0)])


def regular_polygon(n: int, radius: float) -> Polygon:
    return Polygon(
        [
            Point(radius * math.cos(2 * math.pi * i / n), -radius * math.sin(2 * math.pi * i / n))
            for i in range(n)
        ]
    )


class TestUnits:
    """Tests for millimetre conversion."""

    def test_constant(self) -> None:
        """Test the 96 dpi conversion factor."""
        assert MM_TO_PX == 3.7795275591
        assert mm_to_px(2.0) == pytest.approx(7.5590551182)

    def test_round_trip(self) -> None:
        """Test px_to_mm inverts mm_to_px."""
        assert px_to_mm(mm_to_px(3.5)) == pytest.approx(3.5)


class TestLeftNormal:
    """Tests for left_normal."""

    def test_unit_length(self) -> None:
        """Test the normal has unit length."""
        nx, ny = left_normal(3.0, 4.0)
        assert math.hypot(nx, ny) == pytest.approx(1.0)
        assert (nx, ny) == pytest.approx((-0.8, 0.6))

    def test_zero_edge(self) -> None:
        """Test a zero-length edge has no normal."""
        assert left_normal(0.0, 0.0) == (0.0, 0.0)


class TestOffsetPolygon:
    """Tests for offset_polygon_px and offset_polygon."""

    def test_positive_moves_corner_inward(self, square: Polygon) -> None:
        """Test a positive offset moves a corner along the inward diagonal."""
        result = offset_polygon_px(square, 1.0)
        h = 1 / math.sqrt(2)
        assert result[0].x == pytest.approx(h)
        assert result[0].y == pytest.approx(4 - h)

    def test_sign_controls_area(self, square: Polygon) -> None:
        """Test positive shrinks and negative grows a CCW polygon."""
        assert offset_polygon_px(square, 1.0).area() < square.area()
        assert offset_polygon_px(square, -1.0).area() > square.area()

    def test_zero_offset_is_identity(self, square: Polygon) -> None:
        """Test a zero offset leaves vertices in place."""
        result = offset_polygon_px(square, 0.0)
        for p, q in zip(result, square):
            assert p.x == pytest.approx(q.x)
            assert p.y == pytest.approx(q.y)

    def test_length_preserved(self) -> None:
        """Test the number of vertices is unchanged."""
        polygon = regular_polygon(23, 40.0)
        assert len(offset_polygon_px(polygon, 5.0)) == 23

    def test_circle_radius_changes_by_distance(self) -> None:
        """Test a fine regular polygon offsets radially."""
        polygon = regular_polygon(360, 50.0)
        outward = offset_polygon_px(polygon, -4.0)
        inward = offset_polygon_px(polygon, 4.0)
        for p in outward:
            assert math.hypot(p.x, p.y) == pytest.approx(54.0)
        for p in inward:
            assert math.hypot(p.x, p.y) == pytest.approx(46.0)

    def test_collinear_vertex_moves_along_normal(self) -> None:
        """Test a straight-through vertex moves perpendicular to the line."""
        polygon = Polygon([Point(0, 0), Point(2, 0), Point(4, 0)])
        result = offset_polygon_px(polygon, 1.5)
        assert result[1].x == pytest.approx(2.0)
        assert result[1].y == pytest.approx(-1.5)

    def test_cancelling_normals_leave_vertex(self) -> None:
        """Test vertices with opposing incident edges are not moved."""
        polygon = Polygon([Point(0, 0), Point(2, 0), Point(4, 0)])
        result = offset_polygon_px(polygon, 1.5)
        assert result[0] == Point(0, 0)
        assert result[2] == Point(4, 0)

    def test_repeated_vertex_uses_other_edge(self) -> None:
        """Test a zero-length edge contributes no normal."""
        polygon = Polygon([Point(0, 4), Point(4, 4), Point(4, 4), Point(4, 0), Point(0, 0)])
        result = offset_polygon_px(polygon, 1.0)
        assert all(math.isfinite(p.x) and math.isfinite(p.y) for p in result)

    def test_short_polygons_unchanged(self) -> None:
        """Test fewer than 3 points pass through."""
        polygon = Polygon([Point(0, 0), Point(1, 1)])
        assert offset_polygon_px(polygon, 3.0).points == polygon.points

    def test_millimetre_conversion(self, square: Polygon) -> None:
        """Test offset_polygon converts millimetres to pixels."""
        assert offset_polygon(square, 0.5) == offset_polygon_px(square, 0.5 * MM_TO_PX)

    def test_input_not_modified(self, square: Polygon) -> None:
        """Test the input polygon is left untouched."""
        before = list(square.points)
        offset_polygon(square, 1.0)
        assert square.points == before
