"""Exception hierarchy for Cutliner."""


class CutlinerError(Exception):
    """Base exception for all Cutliner errors."""

    pass


class InvalidParameterError(CutlinerError):
    """A cut line parameter is outside its declared range."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid parameter '{name}' = {value!r}: {reason}")


class InvalidBufferError(CutlinerError):
    """Pixel buffer dimensions do not match its data."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid pixel buffer: {reason}")


class PlacementError(CutlinerError):
    """An image cannot be placed inside the safe area of the page."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid placement: {reason}")


class ImageError(CutlinerError):
    """Errors related to image loading."""

    pass


class ImageLoadError(ImageError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ImageNotFoundError(ImageError):
    """Requested image is not on the sheet."""

    def __init__(self, image_id: str) -> None:
        self.image_id = image_id
        super().__init__(f"Image '{image_id}' not found on sheet")


class ExportError(CutlinerError):
    """Errors related to cut line export."""

    pass


class ExportSaveError(ExportError):
    """Error writing an exported document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")
