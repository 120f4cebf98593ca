# tests/conftest.py
import os

# Must be set before catalog modules build settings and the engine
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.dependencies import get_db
from catalog.db.database import Base, build_engine, build_session_factory
from catalog.games.dependencies import get_game_repository
from catalog.main import app as main_app
from catalog.models.domain.game import Game  # noqa: F401  registers the table
from catalog.repositories.game_repository import SQLAlchemyGameRepository
from catalog.repositories.memory_game_repository import InMemoryGameRepository
from catalog.services.game.game_service import GameService

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def memory_repo() -> InMemoryGameRepository:
    return InMemoryGameRepository()


@pytest.fixture
def memory_service(memory_repo) -> GameService:
    """GameService backed by the in-memory repository"""
    return GameService(memory_repo)


@pytest.fixture
async def db_engine():
    """Fresh in-memory SQLite engine with the schema created"""
    engine = build_engine(TEST_DB_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_session_factory(db_engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def sql_repo(db_session) -> SQLAlchemyGameRepository:
    return SQLAlchemyGameRepository(db_session)


@pytest.fixture
async def client(memory_repo) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests share one in-memory repository"""
    main_app.dependency_overrides[get_game_repository] = lambda: memory_repo
    transport = ASGITransport(app=main_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    main_app.dependency_overrides.clear()


@pytest.fixture
async def sql_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client running the real request session dependency against SQLite"""
    async def override_get_db():
        session = session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    main_app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=main_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    main_app.dependency_overrides.clear()
