from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.dependencies import get_db
from catalog.core.repository import GameRepository
from catalog.repositories.game_repository import SQLAlchemyGameRepository
from catalog.services.game.game_service import GameService


# One repository per request, bound to the request's session
async def get_game_repository(db: AsyncSession = Depends(get_db)) -> GameRepository:
    return SQLAlchemyGameRepository(db)


async def get_game_service(repository: GameRepository = Depends(get_game_repository)) -> GameService:
    return GameService(repository)
