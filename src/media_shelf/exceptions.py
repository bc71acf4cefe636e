"""Media shelf exceptions.

Every failure the library surfaces is a MediaError subclass carrying an
optional context dict. An empty shelf is not a failure: pickers return None.
"""


class MediaError(Exception):
    """Base exception for media shelf operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (item type, file path, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class MediaItemTypeError(MediaError):
    """Item does not match the shelf's item type, or the type is not a media item."""


class MediaEncodingError(MediaError):
    """Value cannot be converted to a structured encoding."""


class MediaCatalogError(MediaError):
    """Invalid catalog file contents."""


class MediaRepositoryError(MediaError):
    """Repository failed to provide items."""
