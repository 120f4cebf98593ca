"""
FastAPI application entry point
Application construction is delegated to the app package
"""
import logging

from catalog.core.config import settings
from catalog.core.logging import configure_logging
from catalog.app.base import create_app
from catalog.app.exceptions import register_exception_handlers
from catalog.games import api as games_api
from catalog.health import api as health_api

# Logging must be configured before the app is built
configure_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS,
    log_file=settings.LOG_FILE
)

logger = logging.getLogger(__name__)

app = create_app()

register_exception_handlers(app)

app.include_router(games_api.router, prefix=f"{settings.API_V1_PREFIX}/games")
app.include_router(health_api.router, prefix=f"{settings.API_V1_PREFIX}/health")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on http://{settings.SERVER_HOST}:{settings.SERVER_PORT}")
    uvicorn.run(
        "catalog.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
