"""Video upload, delete and range streaming endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from media_server.api.deps import get_blob_store, get_video_streamer
from media_server.modules.assets import AssetKind, AssetStorageError, BlobStore, MissingUploadError, VideoStreamer
from media_server.schemas import VideoUploadResponse

from ._uploads import delete_asset, missing_upload_response, storage_error_response, store_upload

router = APIRouter()


@router.post("/upload-video", response_model=VideoUploadResponse, summary="Upload a video (multipart field `video`)")
async def upload_video(request: Request, store: BlobStore = Depends(get_blob_store)):
    try:
        url = await store_upload(request, store, AssetKind.VIDEO)
    except MissingUploadError as exc:
        return missing_upload_response(exc)
    except AssetStorageError:
        return storage_error_response(AssetKind.VIDEO, "store")
    return VideoUploadResponse(video_url=url)


@router.delete("/delete-video/{filename}", summary="Delete a video")
async def delete_video(filename: str, store: BlobStore = Depends(get_blob_store)):
    return await delete_asset(store, AssetKind.VIDEO, filename)


@router.get("/videos/{filename}", name="stream_video", summary="Stream a video, honouring Range")
async def stream_video(
    filename: str,
    range_header: Optional[str] = Header(None, alias="Range"),
    streamer: VideoStreamer = Depends(get_video_streamer),
):
    return await streamer.respond(filename, range_header)
