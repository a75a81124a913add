"""Asset domain specific exceptions."""


class AssetError(Exception):
    """Base class for asset related domain errors."""


class MissingUploadError(AssetError):
    """Raised when an upload request carries no file for the expected field."""


class AssetNotFoundError(AssetError):
    """Raised when the requested asset does not exist on disk."""


class AssetStorageError(AssetError):
    """Raised when the filesystem fails while writing, reading or deleting an asset."""


class RangeError(AssetError):
    """Base class for ``Range`` header errors."""


class MalformedRangeError(RangeError):
    """Raised when a ``Range`` header cannot be parsed."""


class RangeNotSatisfiableError(RangeError):
    """Raised when a parsed range falls outside the content."""

    def __init__(self, message: str, size: int) -> None:
        super().__init__(message)
        self.size = size
