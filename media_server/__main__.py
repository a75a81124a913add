"""Run the media server with uvicorn: ``python -m media_server``."""

import uvicorn

from media_server.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "media_server.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
