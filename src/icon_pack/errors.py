"""Exception types raised by the icon pack pipeline."""


class IconPackError(Exception):
    """Base class for all icon pack errors."""


class InvalidIconIdError(IconPackError, ValueError):
    """Icon identifier is not of the form 'collection:name'."""


class StyleConfigError(IconPackError, ValueError):
    """Style configuration value is out of range or malformed."""


class NetworkFetchError(IconPackError):
    """Provider request failed or returned a non-success status."""


class RasterLoadError(IconPackError):
    """Icon markup could not be loaded or drawn by the rasterizer."""

    def __init__(self, icon_id: str, reason: str = ""):
        self.icon_id = icon_id
        message = f"Failed to load SVG image for icon: {icon_id}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EncodingError(IconPackError):
    """Composited raster could not be encoded to image bytes."""


class IconExportError(IconPackError):
    """Export aborted because one icon failed."""

    def __init__(self, icon_id: str):
        self.icon_id = icon_id
        super().__init__(f"Failed to export icon: {icon_id}")
