"""Image reader for loading sticker artwork.

This module provides the ImageReader class for decoding image files
(typically PNG with a transparent background) into pixel buffers.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from cutliner.domain import PixelBuffer
from cutliner.exceptions import ImageLoadError


class ImageReader:
    """Decodes image files into RGBA pixel buffers.

    Images without an alpha channel are converted to RGBA, which makes
    every pixel opaque.

    Example:
        with ImageReader(Path("sticker.png")) as reader:
            buffer = reader.to_pixel_buffer()
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._image: Image.Image | None = None
        self._source: bytes | None = None

    def load(self) -> None:
        """Load and decode the image file.

        Raises:
            FileNotFoundError: If image file does not exist
            ImageLoadError: If the file cannot be decoded or exceeds the
                decompression bomb pixel limit
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        self._source = self._image_path.read_bytes()
        try:
            with Image.open(self._image_path) as img:
                img.load()
                self._image = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            self._source = None
            raise ImageLoadError(str(self._image_path), str(e)) from e

    def _require_image(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def width(self) -> int:
        """Image width in pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        return self._require_image().width

    @property
    def height(self) -> int:
        """Image height in pixels.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        return self._require_image().height

    @property
    def source_bytes(self) -> bytes:
        """Raw file contents, for embedding in exports.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        if self._source is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._source

    def to_pixel_buffer(self) -> PixelBuffer:
        """Return the decoded image as a row-major RGBA buffer.

        Raises:
            RuntimeError: If image has not been loaded yet
        """
        image = self._require_image()
        return PixelBuffer(width=image.width, height=image.height, data=image.tobytes())

    def close(self) -> None:
        """Release the decoded image and its source bytes."""
        if self._image is not None:
            self._image.close()
            self._image = None
        self._source = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
