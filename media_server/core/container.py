"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from media_server.core.config import Settings
from media_server.modules.assets import AssetKind, BlobStore, VideoStreamer


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    blob_store: BlobStore
    video_streamer: VideoStreamer

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        blob_store = BlobStore(
            directories={
                AssetKind.VIDEO: settings.video_storage_dir,
                AssetKind.IMAGE: settings.image_storage_dir,
            },
            upload_chunk_size=settings.storage.upload_chunk_size,
        )
        streamer = VideoStreamer(blob_store, chunk_size=settings.storage.chunk_size)
        return cls(settings=settings, blob_store=blob_store, video_streamer=streamer)

    def init_infrastructure(self) -> None:
        """Ensure the storage directories exist."""
        self.blob_store.ensure_directories()


__all__ = ["ApplicationContainer"]
