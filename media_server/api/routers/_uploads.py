"""Shared upload/delete handling for both asset kinds."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile

from media_server.modules.assets import (
    AssetKind,
    AssetNotFoundError,
    AssetStorageError,
    BlobStore,
    MissingUploadError,
    sanitize_extension,
)

# route name and path parameter serving each kind
RETRIEVAL_ROUTES = {
    AssetKind.VIDEO: ("stream_video", "filename"),
    AssetKind.IMAGE: ("images", "path"),
}


def retrieval_url(request: Request, kind: AssetKind, filename: str) -> str:
    route_name, param = RETRIEVAL_ROUTES[kind]
    return str(request.url_for(route_name, **{param: filename}))


async def store_upload(request: Request, store: BlobStore, kind: AssetKind) -> str:
    """Persist the multipart field named after ``kind`` and return its retrieval URL.

    Anything other than a file with a client filename in that field counts as
    a missing upload.
    """
    async with request.form() as form:
        upload = form.get(kind.value)
        if not isinstance(upload, UploadFile) or not upload.filename:
            raise MissingUploadError(f"No {kind.value} uploaded.")
        filename = await store.put(kind, sanitize_extension(upload.filename), upload)
    return retrieval_url(request, kind, filename)


def missing_upload_response(exc: MissingUploadError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=400)


def storage_error_response(kind: AssetKind, action: str) -> PlainTextResponse:
    return PlainTextResponse(
        f"An error occurred while trying to {action} the {kind.value} file.",
        status_code=500,
    )


async def delete_asset(store: BlobStore, kind: AssetKind, filename: str) -> PlainTextResponse:
    try:
        await store.delete(kind, filename)
    except AssetNotFoundError:
        return PlainTextResponse(f"{kind.label} file not found.", status_code=404)
    except AssetStorageError:
        return storage_error_response(kind, "delete")
    return PlainTextResponse(f"{kind.label} file deleted successfully.", status_code=200)
