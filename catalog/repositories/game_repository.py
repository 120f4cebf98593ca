"""
Game data access (SQLAlchemy repository)
"""
import logging
from typing import Optional, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from catalog.core.exceptions import GameAlreadyExistsError, StorageError
from catalog.core.repository import GameRepository
from catalog.models.domain.game import Game

logger = logging.getLogger(__name__)

class SQLAlchemyGameRepository(GameRepository):
    """Handles game persistence through an async SQLAlchemy session.

    Writes are flushed but not committed; the session owner (the request
    dependency) commits or rolls back the unit of work.
    """

    def __init__(self, session: AsyncSession):
        if session is None:
            raise ValueError("Database session is required for SQLAlchemyGameRepository.")
        self.db = session

    async def find_page(self, page: int, page_size: int) -> List[Game]:
        stmt = (
            select(Game)
            .order_by(Game.name, Game.producer)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list games (page={page}, page_size={page_size}): {e}")
            raise StorageError("Failed to list games") from e
        return list(result.scalars().all())

    async def get_by_id(self, game_id: UUID) -> Optional[Game]:
        try:
            result = await self.db.execute(select(Game).where(Game.id == game_id))
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch game {game_id}: {e}")
            raise StorageError("Failed to fetch game") from e
        return result.scalars().first()

    async def get_by_name_and_producer(self, name: str, producer: str) -> Optional[Game]:
        stmt = select(Game).where(Game.name == name, Game.producer == producer)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up game '{name}' by '{producer}': {e}")
            raise StorageError("Failed to look up game") from e
        return result.scalars().first()

    async def insert(self, game: Game) -> Game:
        self.db.add(game)
        await self._flush(game)
        await self.db.refresh(game)
        logger.debug(f"Game record created in DB: {game.id}")
        return game

    async def update(self, game: Game) -> None:
        self.db.add(game)
        await self._flush(game)

    async def delete(self, game_id: UUID) -> None:
        try:
            await self.db.execute(delete(Game).where(Game.id == game_id))
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete game {game_id}: {e}")
            raise StorageError("Failed to delete game") from e

    async def _flush(self, game: Game) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            # Unique constraint on (name, producer) lost a race with another writer
            await self.db.rollback()
            logger.info(f"Uniqueness conflict while writing game '{game.name}' by '{game.producer}'")
            raise GameAlreadyExistsError(game.name, game.producer) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to write game {game.id}: {e}")
            raise StorageError("Failed to write game") from e
