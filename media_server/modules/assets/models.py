"""Domain models for stored media assets."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

VIDEO_CONTENT_TYPE = "video/mp4"


class AssetKind(str, Enum):
    VIDEO = "video"
    IMAGE = "image"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(slots=True)
class Asset:
    kind: AssetKind
    filename: str
    size_bytes: int

    @property
    def content_type(self) -> str:
        if self.kind is AssetKind.VIDEO:
            return VIDEO_CONTENT_TYPE
        return mimetypes.guess_type(self.filename)[0] or "application/octet-stream"


@dataclass(frozen=True, slots=True)
class ByteRange:
    """Inclusive byte window ``[start, end]``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid byte range {self.start}-{self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def content_range(self, size: int) -> str:
        return f"bytes {self.start}-{self.end}/{size}"


@dataclass(frozen=True, slots=True)
class ResponsePlan:
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    byte_range: Optional[ByteRange] = None

    @property
    def has_body(self) -> bool:
        return self.status_code in (200, 206)
