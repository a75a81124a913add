"""Reusable FastAPI dependencies."""

from fastapi import Request

from media_server.core.container import ApplicationContainer
from media_server.modules.assets import BlobStore, VideoStreamer


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_blob_store(request: Request) -> BlobStore:
    return get_container(request).blob_store


def get_video_streamer(request: Request) -> VideoStreamer:
    return get_container(request).video_streamer


__all__ = [
    "get_blob_store",
    "get_container",
    "get_video_streamer",
]
