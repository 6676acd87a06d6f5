"""Tests for domain models to verify they work correctly."""

import pytest

from cutliner.domain import (
    PixelBuffer,
    Placement,
    Point,
    Polygon,
    StickerImage,
    WindingDirection,
)
from cutliner.exceptions import InvalidBufferError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, 2.5).to_tuple() == (1.5, 2.5)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test points can be collected in a set."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


class TestPolygon:
    """Tests for Polygon class."""

    def test_signed_area_screen_counterclockwise(self) -> None:
        """Counter-clockwise on screen (y down) has a negative shoelace sum."""
        polygon = Polygon([Point(0, 100), Point(100, 100), Point(100, 0), Point(0, 0)])
        assert polygon.signed_area() == pytest.approx(-10000.0)
        assert polygon.direction == WindingDirection.COUNTER_CLOCKWISE
        assert polygon.is_counter_clockwise()

    def test_signed_area_screen_clockwise(self) -> None:
        """Clockwise on screen has a positive shoelace sum."""
        polygon = Polygon([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        assert polygon.signed_area() == pytest.approx(10000.0)
        assert polygon.direction == WindingDirection.CLOCKWISE
        assert not polygon.is_counter_clockwise()

    def test_area_ignores_winding(self) -> None:
        """Test area is positive regardless of winding."""
        polygon = Polygon([Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])
        assert polygon.area() == polygon.reversed().area() == pytest.approx(100.0)

    def test_degenerate_polygon(self) -> None:
        """Fewer than 3 points enclose nothing."""
        polygon = Polygon([Point(0, 0), Point(5, 5)])
        assert polygon.signed_area() == 0.0
        assert polygon.direction is None
        assert not polygon.contains_point(1, 1)

    def test_reversed(self) -> None:
        """Test reversing flips the winding and keeps the points."""
        polygon = Polygon([Point(0, 0), Point(10, 0), Point(10, 10)])
        rev = polygon.reversed()
        assert rev.points == [Point(10, 10), Point(10, 0), Point(0, 0)]
        assert rev.direction != polygon.direction

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        polygon = Polygon([Point(10, 20), Point(100, 30), Point(50, 150)])
        assert polygon.bounding_box() == (10.0, 20.0, 100.0, 150.0)

    def test_bounding_box_empty(self) -> None:
        """Test bounding box of an empty polygon."""
        assert Polygon().bounding_box() == (0.0, 0.0, 0.0, 0.0)

    def test_contains_point(self) -> None:
        """Test point containment."""
        polygon = Polygon([Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        assert polygon.contains_point(50, 50)
        assert not polygon.contains_point(150, 50)

    def test_distinct_count(self) -> None:
        """Test duplicated vertices are counted once."""
        polygon = Polygon([Point(0, 0), Point(0, 0), Point(1, 0), Point(1, 1)])
        assert len(polygon) == 4
        assert polygon.distinct_count() == 3

    def test_sequence_protocol(self) -> None:
        """Test len, iteration and indexing."""
        points = [Point(0, 0), Point(1, 0), Point(1, 1)]
        polygon = Polygon(points)
        assert len(polygon) == 3
        assert list(polygon) == points
        assert polygon[1] == Point(1, 0)

    def test_polygon_serialization(self) -> None:
        """Test polygon serialization and deserialization."""
        polygon = Polygon([Point(0, 0), Point(1.5, 0), Point(1, 2)])
        assert Polygon.from_dict(polygon.to_dict()) == polygon


class TestPixelBuffer:
    """Tests for PixelBuffer class."""

    def test_alpha_lookup(self) -> None:
        """Test alpha values are read from the fourth channel."""
        buffer = PixelBuffer(width=2, height=1, data=bytes([1, 2, 3, 40, 5, 6, 7, 200]))
        assert buffer.alpha(0, 0) == 40
        assert buffer.alpha(1, 0) == 200

    def test_alpha_out_of_bounds_is_transparent(self) -> None:
        """Test pixels outside the buffer read as transparent."""
        buffer = PixelBuffer.from_alpha_rows([[255, 255], [255, 255]])
        assert buffer.alpha(-1, 0) == 0
        assert buffer.alpha(0, -1) == 0
        assert buffer.alpha(2, 0) == 0
        assert buffer.alpha(0, 2) == 0

    def test_from_alpha_rows(self) -> None:
        """Test building a buffer from alpha rows."""
        buffer = PixelBuffer.from_alpha_rows([[0, 128, 255]], color=(9, 8, 7))
        assert (buffer.width, buffer.height) == (3, 1)
        assert buffer.data[:4] == bytes([9, 8, 7, 0])
        assert buffer.alpha(1, 0) == 128

    def test_length_mismatch(self) -> None:
        """Test data length must equal width * height * 4."""
        with pytest.raises(InvalidBufferError, match="expected 16 bytes"):
            PixelBuffer(width=2, height=2, data=bytes(15))

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-1, 4)])
    def test_non_positive_dimensions(self, width: int, height: int) -> None:
        """Test width and height must be positive."""
        with pytest.raises(InvalidBufferError, match="must be positive"):
            PixelBuffer(width=width, height=height, data=b"")

    def test_ragged_rows(self) -> None:
        """Test rows of different lengths are rejected."""
        with pytest.raises(InvalidBufferError):
            PixelBuffer.from_alpha_rows([[255, 255], [255]])

    def test_buffer_serialization(self) -> None:
        """Test buffer serialization and deserialization."""
        buffer = PixelBuffer.from_alpha_rows([[0, 255], [255, 0]])
        assert PixelBuffer.from_dict(buffer.to_dict()) == buffer


class TestStickerImage:
    """Tests for StickerImage and Placement."""

    def test_scaled_size(self) -> None:
        """Test scaled size uses the placement scale."""
        buffer = PixelBuffer.from_alpha_rows([[255] * 10] * 4)
        image = StickerImage(id="a", buffer=buffer, placement=Placement(0, 0, 1.5))
        assert (image.width, image.height) == (10, 4)
        assert image.scaled_size == (15.0, 6.0)
        assert image.cutlines == []

    def test_placement_serialization(self) -> None:
        """Test placement serialization and deserialization."""
        placement = Placement(x=7.5, y=12.0, scale=0.5)
        assert Placement.from_dict(placement.to_dict()) == placement
