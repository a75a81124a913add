"""Filesystem backed blob storage for uploaded media."""

from __future__ import annotations

import logging
import os
import re
import time
from pathlib import Path
from typing import AsyncIterator, Mapping, Optional, Protocol

import anyio

from .exceptions import AssetNotFoundError, AssetStorageError
from .models import Asset, AssetKind, ByteRange

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024
_EXTENSION_RE = re.compile(r"^\.[a-z0-9]{1,16}$")


class AsyncReadable(Protocol):
    async def read(self, size: int = -1) -> bytes: ...


def sanitize_extension(filename: Optional[str]) -> str:
    if not filename:
        return ""
    suffix = Path(os.path.basename(filename.replace("\0", ""))).suffix.lower()
    return suffix if _EXTENSION_RE.match(suffix) else ""


def _is_safe_filename(filename: str) -> bool:
    if not filename or filename in {".", ".."} or "\0" in filename:
        return False
    return os.path.basename(filename) == filename and "/" not in filename and "\\" not in filename


class BlobStore:
    """Stores immutable asset files in one flat directory per asset kind."""

    def __init__(self, directories: Mapping[AssetKind, Path], upload_chunk_size: int = 1024 * 1024) -> None:
        self._directories = {kind: Path(path) for kind, path in directories.items()}
        self._upload_chunk_size = upload_chunk_size

    def directory_for(self, kind: AssetKind) -> Path:
        try:
            return self._directories[kind]
        except KeyError as exc:
            raise AssetStorageError(f"no storage directory configured for {kind.value}") from exc

    def ensure_directories(self) -> None:
        """Create every configured directory if it does not exist."""
        for directory in self._directories.values():
            directory.mkdir(parents=True, exist_ok=True)

    async def generate_filename(self, kind: AssetKind, extension: str = "") -> str:
        directory = anyio.Path(self.directory_for(kind))
        while True:
            candidate = f"{time.time_ns()}-{os.urandom(4).hex()}{extension}"
            if not await (directory / candidate).exists():
                return candidate

    def _path(self, kind: AssetKind, filename: str) -> Path:
        if not _is_safe_filename(filename):
            raise AssetNotFoundError(f"{kind.label} {filename!r} not found")
        return self.directory_for(kind) / filename

    async def put(self, kind: AssetKind, extension: str, upload: AsyncReadable) -> str:
        """Persist ``upload`` and return the generated filename.

        The content is written to a temporary ``.upload`` file and renamed once
        complete, so the returned name never refers to a partial file.
        """
        directory = self.directory_for(kind)
        try:
            await anyio.Path(directory).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise AssetStorageError(f"cannot create {directory}") from exc

        filename = await self.generate_filename(kind, extension)
        target_path = directory / filename
        temp_path = target_path.with_name(target_path.name + ".upload")

        total_size = 0
        try:
            async with await anyio.open_file(temp_path, "xb") as buffer:
                while True:
                    chunk = await upload.read(self._upload_chunk_size)
                    if not chunk:
                        break
                    await buffer.write(chunk)
                    total_size += len(chunk)
            await anyio.Path(temp_path).rename(target_path)
        except OSError as exc:
            await anyio.Path(temp_path).unlink(missing_ok=True)
            logger.error("Failed to store %s %s: %s", kind.value, filename, exc)
            raise AssetStorageError(f"failed to store {kind.value} file") from exc
        except BaseException:
            with anyio.CancelScope(shield=True):
                await anyio.Path(temp_path).unlink(missing_ok=True)
            raise

        logger.info("Stored %s %s (%d bytes)", kind.value, filename, total_size)
        return filename

    async def stat_size(self, kind: AssetKind, filename: str) -> int:
        path = anyio.Path(self._path(kind, filename))
        try:
            stat = await path.stat()
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise AssetNotFoundError(f"{kind.label} {filename!r} not found") from exc
        except OSError as exc:
            raise AssetStorageError(f"cannot stat {kind.value} {filename!r}") from exc
        if not await path.is_file():
            raise AssetNotFoundError(f"{kind.label} {filename!r} not found")
        return stat.st_size

    async def get_asset(self, kind: AssetKind, filename: str) -> Asset:
        return Asset(kind=kind, filename=filename, size_bytes=await self.stat_size(kind, filename))

    async def open_read(
        self,
        kind: AssetKind,
        filename: str,
        byte_range: Optional[ByteRange] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> AsyncIterator[bytes]:
        """Yield the file content, bounded to ``byte_range`` when given.

        The handle is opened on first iteration and closed when the iterator is
        exhausted, closed, cancelled or fails.
        """
        path = self._path(kind, filename)
        try:
            handle = await anyio.open_file(path, "rb")
        except FileNotFoundError as exc:
            raise AssetNotFoundError(f"{kind.label} {filename!r} not found") from exc
        except OSError as exc:
            raise AssetStorageError(f"cannot open {kind.value} {filename!r}") from exc

        try:
            remaining: Optional[int] = None
            if byte_range is not None:
                await handle.seek(byte_range.start)
                remaining = byte_range.length
            while remaining is None or remaining > 0:
                size = chunk_size if remaining is None else min(chunk_size, remaining)
                chunk = await handle.read(size)
                if not chunk:
                    break
                if remaining is not None:
                    remaining -= len(chunk)
                yield chunk
        except OSError as exc:
            raise AssetStorageError(f"failed reading {kind.value} {filename!r}") from exc
        finally:
            with anyio.CancelScope(shield=True):
                await handle.aclose()

    async def delete(self, kind: AssetKind, filename: str) -> None:
        path = anyio.Path(self._path(kind, filename))
        try:
            await path.unlink()
        except FileNotFoundError as exc:
            raise AssetNotFoundError(f"{kind.label} {filename!r} not found") from exc
        except OSError as exc:
            logger.error("Failed to delete %s %s: %s", kind.value, filename, exc)
            raise AssetStorageError(f"failed to delete {kind.value} {filename!r}") from exc
        logger.info("Deleted %s %s", kind.value, filename)
