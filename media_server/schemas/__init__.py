"""Pydantic schemas used across the project."""

from pydantic import BaseModel, ConfigDict, Field


class VideoUploadResponse(BaseModel):
    video_url: str = Field(..., alias="videoUrl")

    model_config = ConfigDict(populate_by_name=True)


class ImageUploadResponse(BaseModel):
    photo_url: str = Field(..., alias="photoUrl")

    model_config = ConfigDict(populate_by_name=True)


class StatusResponse(BaseModel):
    message: str


__all__ = [
    "ImageUploadResponse",
    "StatusResponse",
    "VideoUploadResponse",
]
