"""Domain models for cutliner.

This module contains the core domain models representing pixels, points,
polygons and placed sticker images. Models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of image decoding and SVG details

Key classes:
- Point: A 2D point in pixels
- Polygon: A closed polygon (implicit closing edge)
- PixelBuffer: Row-major RGBA pixels
- Placement: Position and scale on the page
- StickerImage: A placed image with its cut lines
"""

from cutliner.domain.buffer import PixelBuffer
from cutliner.domain.geometry import Point, Polygon, WindingDirection
from cutliner.domain.image import Placement, StickerImage

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Polygon",
    "PixelBuffer",
    "Placement",
    "StickerImage",
]
