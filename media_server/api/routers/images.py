"""Image upload and delete endpoints. Retrieval is a static mount."""

from fastapi import APIRouter, Depends, Request

from media_server.api.deps import get_blob_store
from media_server.modules.assets import AssetKind, AssetStorageError, BlobStore, MissingUploadError
from media_server.schemas import ImageUploadResponse

from ._uploads import delete_asset, missing_upload_response, storage_error_response, store_upload

router = APIRouter()


@router.post("/upload-image", response_model=ImageUploadResponse, summary="Upload an image (multipart field `image`)")
async def upload_image(request: Request, store: BlobStore = Depends(get_blob_store)):
    try:
        url = await store_upload(request, store, AssetKind.IMAGE)
    except MissingUploadError as exc:
        return missing_upload_response(exc)
    except AssetStorageError:
        return storage_error_response(AssetKind.IMAGE, "store")
    return ImageUploadResponse(photo_url=url)


@router.delete("/delete-image/{filename}", summary="Delete an image")
async def delete_image(filename: str, store: BlobStore = Depends(get_blob_store)):
    return await delete_asset(store, AssetKind.IMAGE, filename)
