"""Image and SVG I/O layer for cutliner.

This module keeps file formats out of the geometry core. It decodes
artwork with Pillow and writes cut lines with svgwrite.

Key responsibilities:
- Decode PNG (or any Pillow-readable) images to RGBA pixel buffers
- Serialise placed images and page-space cut lines to SVG

Key classes:
- ImageReader: Load images as pixel buffers
- SvgWriter: Save cut line documents
"""

from cutliner.io.reader import ImageReader
from cutliner.io.writer import SvgWriter, format_path_data

__all__ = [
    "ImageReader",
    "SvgWriter",
    "format_path_data",
]
