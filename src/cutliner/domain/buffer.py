"""Decoded RGBA pixel buffer.

The pipeline only reads the alpha channel. The buffer is borrowed
read-only for the duration of a call and is never modified.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from cutliner.exceptions import InvalidBufferError

CHANNELS = 4


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA pixel data.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: width * height * 4 bytes, RGBA per pixel
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidBufferError(
                f"width and height must be positive, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise InvalidBufferError(
                f"expected {expected} bytes for {self.width}x{self.height} RGBA, "
                f"got {len(self.data)}"
            )

    def alpha(self, x: int, y: int) -> int:
        """Alpha value at (x, y); pixels outside the buffer are transparent."""
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return 0
        return self.data[(y * self.width + x) * CHANNELS + 3]

    @classmethod
    def from_alpha_rows(
        cls, rows: Sequence[Sequence[int]], color: tuple[int, int, int] = (0, 0, 0)
    ) -> "PixelBuffer":
        """Build a buffer from rows of alpha values with a flat colour.

        Args:
            rows: Alpha value per pixel, one sequence per row
            color: RGB shared by every pixel

        Returns:
            PixelBuffer instance

        Raises:
            InvalidBufferError: If rows are empty or ragged
        """
        if not rows or not rows[0]:
            raise InvalidBufferError("alpha rows must not be empty")
        width = len(rows[0])
        data = bytearray()
        for row in rows:
            if len(row) != width:
                raise InvalidBufferError("alpha rows must all have the same length")
            for a in row:
                data.extend((color[0], color[1], color[2], a))
        return cls(width=width, height=len(rows), data=bytes(data))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"width": self.width, "height": self.height, "data": self.data}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PixelBuffer":
        """Deserialize from dictionary."""
        return cls(width=data["width"], height=data["height"], data=data["data"])
