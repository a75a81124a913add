"""Byte-range aware responses for video playback."""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

import anyio
from fastapi import Response
from fastapi.responses import PlainTextResponse, StreamingResponse
from starlette.requests import ClientDisconnect
from starlette.types import Receive, Scope, Send

from .exceptions import AssetNotFoundError, AssetStorageError, RangeError
from .models import VIDEO_CONTENT_TYPE, Asset, AssetKind, ByteRange, ResponsePlan
from .ranges import parse_range_header
from .store import DEFAULT_CHUNK_SIZE, BlobStore

logger = logging.getLogger(__name__)


def plan_response(size: int, range_header: Optional[str], content_type: str = VIDEO_CONTENT_TYPE) -> ResponsePlan:
    """Decide between a full (200), partial (206) or unsatisfiable (416) response."""
    if not range_header or not range_header.strip():
        return ResponsePlan(
            status_code=200,
            headers={
                "Content-Length": str(size),
                "Content-Type": content_type,
                "Accept-Ranges": "bytes",
            },
        )

    try:
        byte_range = parse_range_header(range_header, size)
    except RangeError as exc:
        logger.warning("Rejected range %r for %d bytes: %s", range_header, size, exc)
        return ResponsePlan(status_code=416, headers={"Content-Range": f"bytes */{size}"})

    return ResponsePlan(
        status_code=206,
        headers={
            "Content-Range": byte_range.content_range(size),
            "Accept-Ranges": "bytes",
            "Content-Length": str(byte_range.length),
            "Content-Type": content_type,
        },
        byte_range=byte_range,
    )


class ClosingStreamingResponse(StreamingResponse):
    """``StreamingResponse`` that closes its body iterator on every exit path.

    Starlette abandons the iterator when the client goes away, which would keep
    the underlying file open until the generator is garbage collected.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        except ClientDisconnect:
            logger.debug("Client disconnected before the response completed")
        finally:
            with anyio.CancelScope(shield=True):
                await self.body_iterator.aclose()


class VideoStreamer:
    """Serves stored videos, honouring ``Range`` requests."""

    def __init__(self, store: BlobStore, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._store = store
        self._chunk_size = chunk_size

    async def respond(self, filename: str, range_header: Optional[str]) -> Response:
        try:
            asset = await self._store.get_asset(AssetKind.VIDEO, filename)
        except AssetNotFoundError:
            return PlainTextResponse("Video not found.", status_code=404)
        except AssetStorageError as exc:
            logger.error("Cannot stat video %s: %s", filename, exc)
            return PlainTextResponse("An error occurred while reading the video file.", status_code=500)

        plan = plan_response(asset.size_bytes, range_header, asset.content_type)
        if not plan.has_body:
            return PlainTextResponse(
                "Requested range not satisfiable.",
                status_code=plan.status_code,
                headers=plan.headers,
            )

        logger.debug("Streaming video %s status=%d range=%s", filename, plan.status_code, plan.byte_range)
        return ClosingStreamingResponse(
            self._stream(asset, plan.byte_range),
            status_code=plan.status_code,
            headers=plan.headers,
            media_type=asset.content_type,
        )

    async def _stream(self, asset: Asset, byte_range: Optional[ByteRange]) -> AsyncIterator[bytes]:
        chunks = self._store.open_read(asset.kind, asset.filename, byte_range, chunk_size=self._chunk_size)
        try:
            async for chunk in chunks:
                yield chunk
        except (GeneratorExit, anyio.get_cancelled_exc_class()):
            logger.debug("Stream of %s closed before completion", asset.filename)
            raise
        except (AssetNotFoundError, AssetStorageError) as exc:
            # headers are already sent; the response ends short
            logger.error("Streaming %s aborted: %s", asset.filename, exc)
        finally:
            with anyio.CancelScope(shield=True):
                await chunks.aclose()
