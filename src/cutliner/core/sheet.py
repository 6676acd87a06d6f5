"""Sheet of placed sticker images.

The sheet is the host-side state behind an editor: which images are on
the page, where they sit and at what scale, and the current cut line
parameters. Cut lines are regenerated from each image's pixels whenever
the parameters change; moving or scaling an image only changes its
placement.
"""

import logging
import uuid
from collections.abc import Iterator

from cutliner.config import CutLineParams, PageConfig
from cutliner.core.pipeline import CutLinePipeline
from cutliner.core.placement import PlacementModel, to_page_coords
from cutliner.domain import PixelBuffer, Placement, Polygon, StickerImage
from cutliner.exceptions import ImageNotFoundError

logger = logging.getLogger(__name__)


class Sheet:
    """A page holding sticker images and their cut lines.

    Example:
        sheet = Sheet(PageConfig(), CutLineParams(offset_mm=-1.0))
        image = sheet.add_image(buffer, name="cat.png")
        sheet.move_image(image.id, 120, 40)
        for image, outlines in sheet.page_cutlines():
            ...
    """

    def __init__(
        self, page: PageConfig | None = None, params: CutLineParams | None = None
    ) -> None:
        self.placement_model = PlacementModel(page)
        self._pipeline = CutLinePipeline(params)
        self._images: dict[str, StickerImage] = {}

    @property
    def page(self) -> PageConfig:
        return self.placement_model.page

    @property
    def params(self) -> CutLineParams:
        return self._pipeline.params

    @property
    def images(self) -> list[StickerImage]:
        """Images in insertion order."""
        return list(self._images.values())

    def __len__(self) -> int:
        return len(self._images)

    def get(self, image_id: str) -> StickerImage:
        """Look up an image by id.

        Raises:
            ImageNotFoundError: If no image has this id
        """
        try:
            return self._images[image_id]
        except KeyError:
            raise ImageNotFoundError(image_id) from None

    def add_image(
        self,
        buffer: PixelBuffer,
        name: str = "",
        source: bytes | None = None,
        scale: float = 1.0,
        cutlines: list[Polygon] | None = None,
    ) -> StickerImage:
        """Add an image at the top-left corner of the safe area.

        Args:
            buffer: Decoded pixels
            name: Display name
            source: Encoded image bytes for export
            scale: Initial scale factor
            cutlines: Precomputed cut lines for the current parameters;
                generated from the buffer when None

        Returns:
            The new image

        Raises:
            PlacementError: If the image does not fit at this scale
        """
        margin = self.placement_model.margin_px
        image = StickerImage(
            id=uuid.uuid4().hex,
            buffer=buffer,
            placement=Placement(x=margin, y=margin, scale=scale),
            name=name,
            source=source,
        )
        self.placement_model.place(image, margin, margin, scale)
        image.cutlines = cutlines if cutlines is not None else self._pipeline.generate(buffer)
        self._images[image.id] = image

        logger.debug(
            "Image added: %s (%s, %dx%d px, %d cut lines)",
            image.id, name, buffer.width, buffer.height, len(image.cutlines)
        )
        return image

    def remove_image(self, image_id: str) -> None:
        """Remove an image from the sheet.

        Raises:
            ImageNotFoundError: If no image has this id
        """
        self.get(image_id)
        del self._images[image_id]

    def move_image(self, image_id: str, x: float, y: float) -> StickerImage:
        """Move an image, clamping it into the safe area."""
        image = self.get(image_id)
        return self.placement_model.place(image, x, y, image.placement.scale)

    def set_scale(self, image_id: str, scale: float) -> StickerImage:
        """Rescale an image, keeping its top-left corner where possible.

        Raises:
            PlacementError: If the new scale is invalid
        """
        image = self.get(image_id)
        return self.placement_model.place(image, image.placement.x, image.placement.y, scale)

    def set_params(self, params: CutLineParams) -> None:
        """Replace the parameters and regenerate every image's cut lines."""
        self._pipeline = CutLinePipeline(params)
        for image in self._images.values():
            image.cutlines = self._pipeline.generate(image.buffer)

    def page_cutlines(self) -> Iterator[tuple[StickerImage, list[Polygon]]]:
        """Yield each image with its cut lines in page coordinates."""
        for image in self._images.values():
            yield image, [to_page_coords(p, image.placement) for p in image.cutlines]
