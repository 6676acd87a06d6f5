"""Sticker image representation and placement.

A sticker image owns its decoded pixels, its placement on the page and
the cut lines derived from those pixels. Placement and scale are editor
metadata; the geometry pipeline only reads the pixels.
"""

from dataclasses import dataclass, field
from typing import Any

from cutliner.domain.buffer import PixelBuffer
from cutliner.domain.geometry import Polygon


@dataclass(frozen=True)
class Placement:
    """Position and scale of an image on the page.

    Attributes:
        x: Left edge on the page in pixels
        y: Top edge on the page in pixels
        scale: Dimensionless positive scale factor
    """

    x: float
    y: float
    scale: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "scale": self.scale}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Placement":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], scale=data["scale"])


@dataclass
class StickerImage:
    """An image placed on the sheet together with its cut lines.

    Attributes:
        id: Unique identifier on the sheet
        buffer: Source pixels
        placement: Current placement on the page
        name: Display name (usually the file name)
        source: Encoded image bytes for embedding in exports
        cutlines: Image-local cut line polygons, regenerated on every change
    """

    id: str
    buffer: PixelBuffer
    placement: Placement
    name: str = ""
    source: bytes | None = field(default=None, repr=False)
    cutlines: list[Polygon] = field(default_factory=list)

    @property
    def width(self) -> int:
        """Native width in pixels."""
        return self.buffer.width

    @property
    def height(self) -> int:
        """Native height in pixels."""
        return self.buffer.height

    @property
    def scaled_size(self) -> tuple[float, float]:
        """Width and height on the page after scaling."""
        s = self.placement.scale
        return (self.buffer.width * s, self.buffer.height * s)
