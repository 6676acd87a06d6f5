"""Cut line generation pipeline.

Sequences the geometry stages for one image:

    extract contour -> simplify -> smooth -> offset -> drop degenerate

The pipeline is a pure function of (pixels, parameters). Nothing is cached
between runs: changing any parameter regenerates from the pixel buffer.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from cutliner.config import CutLineParams
from cutliner.core.contour import ContourExtractor
from cutliner.core.offset import offset_polygon
from cutliner.core.simplify import simplify_polygon
from cutliner.core.smooth import smooth_polygon
from cutliner.domain import PixelBuffer, Polygon
from cutliner.exceptions import InvalidBufferError, InvalidParameterError

logger = logging.getLogger(__name__)

MIN_POLYGON_POINTS = 3


def validate_params(params: CutLineParams | Mapping[str, Any] | None) -> CutLineParams:
    """Validate cut line parameters before any work is done.

    Args:
        params: Parameters object, plain mapping, or None for defaults

    Returns:
        Validated CutLineParams

    Raises:
        InvalidParameterError: If a value is outside its range or step
    """
    if params is None:
        return CutLineParams()

    data = params.model_dump() if isinstance(params, CutLineParams) else dict(params)
    try:
        return CutLineParams.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        name = ".".join(str(part) for part in error["loc"]) or "params"
        raise InvalidParameterError(name, error.get("input"), error["msg"]) from e


class CutLinePipeline:
    """Runs the extract/simplify/smooth/offset sequence for one parameter set.

    Example:
        pipeline = CutLinePipeline(CutLineParams(offset_mm=-1.0))
        polygons = pipeline.generate(buffer)
    """

    def __init__(self, params: CutLineParams | Mapping[str, Any] | None = None) -> None:
        """Initialize the pipeline.

        Args:
            params: Cut line parameters (validated here)

        Raises:
            InvalidParameterError: If parameters are invalid
        """
        self.params = validate_params(params)
        self.extractor = ContourExtractor(alpha_threshold=self.params.alpha_threshold)

    def process_contour(self, contour: Polygon) -> Polygon:
        """Simplify, smooth and offset a single contour."""
        simplified = simplify_polygon(contour, self.params.smoothness)
        smoothed = smooth_polygon(simplified, self.params.smooth_iterations)
        return offset_polygon(smoothed, self.params.offset_mm)

    def generate(self, buffer: PixelBuffer) -> list[Polygon]:
        """Generate cut lines for one image.

        Args:
            buffer: Source pixels (read only)

        Returns:
            Zero or one polygon with at least 3 points
        """
        result: list[Polygon] = []
        for contour in self.extractor.extract(buffer):
            outline = self.process_contour(contour)
            if len(outline) < MIN_POLYGON_POINTS:
                logger.debug("Degenerate contour dropped (%d points)", len(outline))
                continue
            result.append(outline)
        return result


def generate_cutlines(
    buffer: PixelBuffer, params: CutLineParams | Mapping[str, Any] | None = None
) -> list[Polygon]:
    """Generate cut lines for a pixel buffer.

    Args:
        buffer: Source pixels
        params: Cut line parameters (defaults when None)

    Returns:
        Zero or one image-local polygon

    Raises:
        InvalidParameterError: If parameters are invalid
    """
    return CutLinePipeline(params).generate(buffer)


def _pixels_to_bytes(pixels: bytes | bytearray | memoryview | Sequence[Any]) -> bytes:
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        return bytes(pixels)
    try:
        if pixels and isinstance(pixels[0], Sequence):
            return bytes(channel for pixel in pixels for channel in pixel)
        return bytes(pixels)
    except (TypeError, ValueError) as e:
        raise InvalidBufferError(f"pixels must be RGBA values in 0..255: {e}") from e


def generate_cutlines_from_pixels(
    pixels: bytes | bytearray | memoryview | Sequence[Any],
    width: int,
    height: int,
    params: CutLineParams | Mapping[str, Any] | None = None,
) -> list[Polygon]:
    """Generate cut lines from raw RGBA samples.

    Parameters are validated first, then the buffer, so no work is done
    for invalid input.

    Args:
        pixels: Flat RGBA bytes/ints, or a sequence of (r, g, b, a) tuples
        width: Width in pixels
        height: Height in pixels
        params: Cut line parameters

    Returns:
        Zero or one image-local polygon

    Raises:
        InvalidParameterError: If parameters are invalid
        InvalidBufferError: If dimensions do not match the pixel data
    """
    pipeline = CutLinePipeline(params)
    buffer = PixelBuffer(width=width, height=height, data=_pixels_to_bytes(pixels))
    return pipeline.generate(buffer)
