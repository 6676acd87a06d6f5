"""SVG writer for exporting cut lines.

The exported document has two layers: the placed artwork
(``image-layer``) and the cut paths (``cutlines-layer``). Cut paths are
closed, unfilled and expressed in page pixels.
"""

import base64
import io
from collections.abc import Iterable
from pathlib import Path

import svgwrite
from PIL import Image

from cutliner.config import ExportConfig, PageConfig
from cutliner.core.placement import to_page_coords
from cutliner.domain import Point, StickerImage
from cutliner.exceptions import ExportSaveError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def format_path_data(points: Iterable[Point], precision: int = 2) -> str:
    """Build SVG path data for a closed polygon.

    Args:
        points: Polygon vertices in page pixels
        precision: Decimal places per coordinate

    Returns:
        Path data like ``"M 1.00 2.00 L 3.00 4.00 Z"``, or an empty string
        for an empty polygon
    """
    commands = [
        f"{'M' if i == 0 else 'L'} {p.x:.{precision}f} {p.y:.{precision}f}"
        for i, p in enumerate(points)
    ]
    if not commands:
        return ""
    return " ".join(commands) + " Z"


def image_data_uri(image: StickerImage) -> str:
    """Encode an image as a base64 PNG data URI.

    The source file is embedded as-is when it is a PNG; otherwise the decoded
    pixels are re-encoded.
    """
    payload = image.source
    if payload is None or not payload.startswith(PNG_SIGNATURE):
        buf = io.BytesIO()
        Image.frombytes(
            "RGBA", (image.buffer.width, image.buffer.height), image.buffer.data
        ).save(buf, format="PNG")
        payload = buf.getvalue()
    return "data:image/png;base64," + base64.b64encode(payload).decode("ascii")


class SvgWriter:
    """Writes placed images and their cut lines as an SVG document.

    Example:
        writer = SvgWriter(PageConfig(), ExportConfig())
        writer.save(sheet.images, Path("cutline.svg"))
    """

    def __init__(self, page: PageConfig | None = None, config: ExportConfig | None = None) -> None:
        """Initialize the writer.

        Args:
            page: Page size, used for the document size
            config: Export options (colour, stroke width, precision)
        """
        self._page = page or PageConfig()
        self._config = config or ExportConfig()

    def _stylesheet(self) -> str:
        return (
            ".cutline { "
            "fill: none; "
            f"stroke: {self._config.line_color.rgb}; "
            f"stroke-width: {self._config.stroke_width:g}; "
            "}"
        )

    def build(self, images: Iterable[StickerImage]) -> svgwrite.Drawing:
        """Build the SVG drawing.

        Args:
            images: Placed images with image-local cut lines

        Returns:
            svgwrite Drawing
        """
        dwg = svgwrite.Drawing(
            size=(f"{self._page.width_px:g}", f"{self._page.height_px:g}"),
            profile="full",
        )
        dwg.defs.add(dwg.style(self._stylesheet()))

        image_layer = dwg.g(id="image-layer")
        cutline_layer = dwg.g(id="cutlines-layer")

        for img_idx, image in enumerate(images):
            if self._config.embed_images:
                width, height = image.scaled_size
                image_layer.add(
                    dwg.image(
                        href=image_data_uri(image),
                        insert=(image.placement.x, image.placement.y),
                        size=(width, height),
                    )
                )

            for path_idx, polygon in enumerate(image.cutlines):
                page_polygon = to_page_coords(polygon, image.placement)
                path_data = format_path_data(page_polygon, self._config.precision)
                if not path_data:
                    continue
                cutline_layer.add(
                    dwg.path(
                        d=path_data,
                        class_="cutline",
                        id=f"cutline-{img_idx}-{path_idx}",
                    )
                )

        dwg.add(image_layer)
        dwg.add(cutline_layer)
        return dwg

    def render(self, images: Iterable[StickerImage]) -> str:
        """Render the SVG document to a string (with XML declaration)."""
        out = io.StringIO()
        self.build(images).write(out, pretty=True)
        return out.getvalue()

    def save(self, images: Iterable[StickerImage], output_path: Path) -> None:
        """Write the SVG document to a file.

        Raises:
            ExportSaveError: If the file cannot be written
        """
        svg = self.render(images)
        try:
            output_path.write_text(svg, encoding="utf-8")
        except OSError as e:
            raise ExportSaveError(str(output_path), str(e)) from e
