"""
Core/Common dependencies for the API
"""
from typing import AsyncGenerator, Dict

from fastapi import Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import settings
from catalog.db.database import get_db as get_db_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides a database session dependency.
    Uses the main session generator from database.py.
    """
    async for session in get_db_session():
        yield session


def common_pagination_params(
    page: int = Query(1, ge=1, description="Page to fetch, starting at 1"),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE,
        description=f"Number of games per page (1 to {settings.MAX_PAGE_SIZE})"
    ),
) -> Dict[str, int]:
    """Pagination query parameters shared by list endpoints"""
    return {"page": page, "page_size": page_size}
