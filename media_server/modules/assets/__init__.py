"""Media asset domain exports."""

from .exceptions import (
    AssetError,
    AssetNotFoundError,
    AssetStorageError,
    MalformedRangeError,
    MissingUploadError,
    RangeError,
    RangeNotSatisfiableError,
)
from .models import VIDEO_CONTENT_TYPE, Asset, AssetKind, ByteRange, ResponsePlan
from .ranges import parse_range_header
from .responder import VideoStreamer, plan_response
from .store import BlobStore, sanitize_extension

__all__ = [
    "Asset",
    "AssetError",
    "AssetKind",
    "AssetNotFoundError",
    "AssetStorageError",
    "BlobStore",
    "ByteRange",
    "MalformedRangeError",
    "MissingUploadError",
    "RangeError",
    "RangeNotSatisfiableError",
    "ResponsePlan",
    "VIDEO_CONTENT_TYPE",
    "VideoStreamer",
    "parse_range_header",
    "plan_response",
    "sanitize_extension",
]
