"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False


class StorageSettings(BaseModel):
    root: Path = Field(default=Path("uploads"))
    videos_dir: str = "videos"
    images_dir: str = "images"
    chunk_size: int = Field(default=64 * 1024, gt=0)
    upload_chunk_size: int = Field(default=1024 * 1024, gt=0)


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MEDIA_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Media Server"

    server: ServerSettings = ServerSettings()
    storage: StorageSettings = StorageSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def storage_root(self) -> Path:
        return self.storage.root.resolve()

    @property
    def video_storage_dir(self) -> Path:
        return self.storage_root / self.storage.videos_dir

    @property
    def image_storage_dir(self) -> Path:
        return self.storage_root / self.storage.images_dir


@lru_cache()
def get_settings() -> Settings:
    return Settings()
