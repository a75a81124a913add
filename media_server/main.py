from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from media_server import __version__
from media_server.api import create_api_router
from media_server.core.config import Settings, get_settings
from media_server.core.container import ApplicationContainer
from media_server.core.logging import configure_logging
from media_server.schemas import StatusResponse


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.logging.level)

    container = ApplicationContainer.from_settings(settings)
    # StaticFiles checks its directory at mount time
    container.init_infrastructure()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        container.init_infrastructure()
        yield

    app = FastAPI(
        title=settings.project_name,
        description="Media upload and range streaming server",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Range", "Accept-Ranges", "Content-Length"],
    )

    app.include_router(create_api_router())
    app.mount(
        "/images",
        StaticFiles(directory=str(settings.image_storage_dir)),
        name="images",
    )

    @app.get("/", response_model=StatusResponse)
    async def healthcheck() -> StatusResponse:
        return StatusResponse(message="Ok!")

    return app
