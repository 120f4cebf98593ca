"""
Health check API
"""
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import settings
from catalog.core.dependencies import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"]) # Prefix handled in main.py


@router.get(
    "",
    summary="Basic health check",
    response_model=Dict[str, str],
    response_description="Service status, version and environment",
)
async def basic_health_check() -> Dict[str, str]:
    return {
        "status": "ok",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }


async def check_database_connectivity(db: AsyncSession) -> Dict[str, Any]:
    """Run a trivial query and report status and latency"""
    start_time = time.perf_counter()
    try:
        result = await db.execute(text("SELECT 1"))
        result.scalar()
    except SQLAlchemyError as e:
        latency = time.perf_counter() - start_time
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "error",
            "message": f"Failed to connect or query: {str(e)[:100]}",
            "latency_ms": round(latency * 1000, 2),
        }
    latency = time.perf_counter() - start_time
    return {"status": "ok", "latency_ms": round(latency * 1000, 2)}


@router.get(
    "/detailed",
    summary="Detailed health check",
    description="""
    Checks database connectivity.

    - **200 OK** when every component reports `ok`.
    - **503 Service Unavailable** when any component reports `error`.
    """,
    response_model=Dict[str, Any],
)
async def detailed_health_check(db: AsyncSession = Depends(get_db)):
    components = {"database": await check_database_connectivity(db)}
    overall_ok = all(component["status"] == "ok" for component in components.values())
    body = {
        "overall_status": "ok" if overall_ok else "error",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "checked_at": datetime.now(timezone.utc).isoformat(),
        "components": components,
    }
    return JSONResponse(
        status_code=status.HTTP_200_OK if overall_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body,
    )
