"""Core geometry for cutliner.

This module contains the cut line algorithms:

- Contour extraction (edge pixels + convex hull)
- Douglas-Peucker simplification
- [1 2 1]/4 smoothing
- Averaged-normal polygon offsetting
- Page placement and the editable sheet

All geometry functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects, no I/O)
- Total over valid input (degenerate cases fall back, never raise)

The file-driven orchestrator lives in ``cutliner.core.processor`` and is
imported from there directly, since it depends on the I/O layer.

Key functions:
- generate_cutlines: Full pipeline for one pixel buffer
- convex_hull: Andrew's monotone chain
- douglas_peucker: Iterative polyline reduction
- smooth_polygon: Binomial corner cutting
- offset_polygon: Signed offset in millimetres
- to_page_coords: Image-local to page transform

Key classes:
- ContourExtractor: Alpha mask to single outline
- CutLinePipeline: Extract/simplify/smooth/offset sequence
- PlacementModel: Safe-area validation and clamping
- Sheet: Placed images and their cut lines
"""

from cutliner.core.contour import ContourExtractor, convex_hull, find_edge_pixels
from cutliner.core.offset import offset_polygon, offset_polygon_px
from cutliner.core.pipeline import (
    CutLinePipeline,
    generate_cutlines,
    generate_cutlines_from_pixels,
    validate_params,
)
from cutliner.core.placement import PlacementModel, to_page_coords
from cutliner.core.sheet import Sheet
from cutliner.core.simplify import douglas_peucker, perpendicular_distance, simplify_polygon
from cutliner.core.smooth import smooth_polygon
from cutliner.units import (
    MM_TO_PX,
    SAFETY_MARGIN_MM,
    SAFETY_MARGIN_PX,
    mm_to_px,
    px_to_mm,
)

__all__ = [
    # Constants
    "MM_TO_PX",
    "SAFETY_MARGIN_MM",
    "SAFETY_MARGIN_PX",
    # Classes
    "ContourExtractor",
    "CutLinePipeline",
    "PlacementModel",
    "Sheet",
    # Functions
    "convex_hull",
    "douglas_peucker",
    "find_edge_pixels",
    "generate_cutlines",
    "generate_cutlines_from_pixels",
    "mm_to_px",
    "offset_polygon",
    "offset_polygon_px",
    "perpendicular_distance",
    "px_to_mm",
    "simplify_polygon",
    "smooth_polygon",
    "to_page_coords",
    "validate_params",
]
