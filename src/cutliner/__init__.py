"""Cutliner - Generate die-cut lines for stickers.

Cutliner is a CLI tool and library that derives a vector cut line from an
image with a transparent background. The opaque region is outlined,
simplified, smoothed and offset inward or outward by a distance in
millimetres, and the result is exported as SVG.

Example:
    $ cutliner sticker.png --offset -1 -o cutline.svg

This places sticker.png on an 800x600 px page and writes its artwork and
a magenta cut line 1 mm outside its outline to cutline.svg.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
