"""Page placement model.

Images must stay inside the page minus a safety margin on every side.
Image-local cut line points map to the page as ``(x + u * s, y + v * s)``.
"""

from cutliner.config import PageConfig
from cutliner.domain import Placement, Point, Polygon, StickerImage
from cutliner.exceptions import PlacementError
from cutliner.units import mm_to_px


class PlacementModel:
    """Validates, clamps and transforms image placements on a page.

    Example:
        model = PlacementModel(PageConfig(width_px=800, height_px=600))
        x, y = model.clamp(-50, 20, width=100, height=100, scale=1.0)
    """

    def __init__(self, page: PageConfig | None = None) -> None:
        """Initialize the placement model.

        Args:
            page: Page dimensions and margin (defaults to 800x600 px, 2 mm)
        """
        self.page = page or PageConfig()
        self.margin_px = mm_to_px(self.page.margin_mm)

    @property
    def safe_area(self) -> tuple[float, float, float, float]:
        """Safe area as (min_x, min_y, max_x, max_y) in page pixels."""
        return (
            self.margin_px,
            self.margin_px,
            self.page.width_px - self.margin_px,
            self.page.height_px - self.margin_px,
        )

    def fits(self, width: float, height: float, scale: float) -> bool:
        """Check whether a scaled image fits inside the safe area at all."""
        min_x, min_y, max_x, max_y = self.safe_area
        return width * scale <= max_x - min_x and height * scale <= max_y - min_y

    def is_valid(self, x: float, y: float, width: float, height: float, scale: float) -> bool:
        """Check whether a placement keeps the image inside the safe area.

        Args:
            x: Left edge on the page
            y: Top edge on the page
            width: Native image width
            height: Native image height
            scale: Scale factor

        Returns:
            True if the scaled image lies within the margins
        """
        min_x, min_y, max_x, max_y = self.safe_area
        return (
            min_x <= x
            and x + width * scale <= max_x
            and min_y <= y
            and y + height * scale <= max_y
        )

    def clamp(
        self, x: float, y: float, width: float, height: float, scale: float
    ) -> tuple[float, float]:
        """Project a position onto the nearest valid placement.

        When the scaled image is larger than the safe area the left/top
        margin wins, so the image never starts outside the page.

        Returns:
            Clamped (x, y)
        """
        min_x, min_y, max_x, max_y = self.safe_area
        new_x = max(min_x, min(x, max_x - width * scale))
        new_y = max(min_y, min(y, max_y - height * scale))
        return new_x, new_y

    def place(self, image: StickerImage, x: float, y: float, scale: float) -> StickerImage:
        """Place an image at (x, y) with the given scale, clamping the position.

        Args:
            image: Image to place (updated in place and returned)
            x: Requested left edge
            y: Requested top edge
            scale: Requested scale factor

        Returns:
            The same image with its new placement

        Raises:
            PlacementError: If the scale is not positive or the scaled
                image cannot fit inside the safe area
        """
        if scale <= 0:
            raise PlacementError(f"scale must be positive, got {scale}")
        if not self.fits(image.width, image.height, scale):
            raise PlacementError(
                f"{image.width}x{image.height} px at scale {scale} does not fit "
                f"inside the {self.page.width_px}x{self.page.height_px} px page margins"
            )

        new_x, new_y = self.clamp(x, y, image.width, image.height, scale)
        image.placement = Placement(x=new_x, y=new_y, scale=scale)
        return image


def to_page_coords(polygon: Polygon, placement: Placement) -> Polygon:
    """Transform an image-local polygon into page coordinates.

    Args:
        polygon: Polygon in image pixels
        placement: Image placement

    Returns:
        New polygon in page pixels
    """
    s = placement.scale
    return Polygon(
        points=[Point(placement.x + p.x * s, placement.y + p.y * s) for p in polygon.points]
    )
