"""Millimetre/pixel conversion at 96 dpi.

All distances inside the pipeline are pixels. Only the user-facing
offset is given in millimetres and is converted at the offset stage.
These constants are shared with the exporter and must not change.
"""

MM_TO_PX = 3.7795275591
SAFETY_MARGIN_MM = 2.0
SAFETY_MARGIN_PX = SAFETY_MARGIN_MM * MM_TO_PX


def mm_to_px(value: float) -> float:
    """Convert millimetres to pixels."""
    return value * MM_TO_PX


def px_to_mm(value: float) -> float:
    """Convert pixels to millimetres."""
    return value / MM_TO_PX
