import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from catalog.core.config import settings
from catalog.db.database import engine, create_tables

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    logger.info("Lifespan: Startup")
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables(engine)
    yield
    logger.info("Lifespan: Shutdown")
    await engine.dispose()
    logger.info("Database connections closed.")
