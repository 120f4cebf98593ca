import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.core.config import settings
from catalog.app.lifespan import lifespan
from catalog.middlewares.tracing import TracingMiddleware

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(TracingMiddleware, trace_header=settings.TRACE_HEADER)

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.info(f"CORS middleware added with origins: {settings.BACKEND_CORS_ORIGINS}")

    return app
