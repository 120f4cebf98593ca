"""
Database connection and session management
"""
import logging
from typing import AsyncGenerator, Any, Dict

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from catalog.core.config import settings

logger = logging.getLogger(__name__)

# SQLAlchemy declarative base
Base = declarative_base()


def engine_options(database_url: str) -> Dict[str, Any]:
    """Engine keyword arguments appropriate for the given URL"""
    if database_url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url:
            # A single shared connection, otherwise every checkout sees an empty database
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_pre_ping": True,
        "pool_timeout": 30,
        "pool_recycle": 1800,
    }


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    return create_async_engine(database_url, echo=echo, **engine_options(database_url))


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)


engine = build_engine(str(settings.SQLALCHEMY_DATABASE_URI), echo=settings.DB_ECHO)
session_factory = build_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Provide one session per request; commit on success, roll back on error"""
    session = session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        # Closing also discards a transaction left open by a cancelled request
        await session.close()


async def create_tables(bind: AsyncEngine) -> None:
    """Create all tables known to the ORM metadata"""
    # Importing the models registers them on Base.metadata
    from catalog.models import domain  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured.")
