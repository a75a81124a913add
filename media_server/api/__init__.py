from fastapi import APIRouter

from media_server.api.routers import images, videos


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(videos.router, tags=["videos"])
    router.include_router(images.router, tags=["images"])
    return router


__all__ = [
    "create_api_router",
]
