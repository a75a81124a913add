from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from media_server.core.config import Settings, StorageSettings
from media_server.main import create_app
from media_server.modules.assets import AssetKind, BlobStore

VIDEO_BYTES = bytes(i % 251 for i in range(1000))


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        storage=StorageSettings(root=tmp_path / "uploads", chunk_size=64),
    )


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def blob_store(tmp_path: Path) -> BlobStore:
    store = BlobStore(
        {
            AssetKind.VIDEO: tmp_path / "videos",
            AssetKind.IMAGE: tmp_path / "images",
        },
        upload_chunk_size=128,
    )
    store.ensure_directories()
    return store


@pytest.fixture
def stored_video(settings: Settings) -> str:
    settings.video_storage_dir.mkdir(parents=True, exist_ok=True)
    name = "1700000000000-abcd.mp4"
    (settings.video_storage_dir / name).write_bytes(VIDEO_BYTES)
    return name
