"""
Game service
Business rules for the game catalog: uniqueness, lookups, pagination, updates
"""
import logging
import math
from uuid import UUID, uuid4
from typing import Optional, List

from catalog.core.config import settings
from catalog.core.exceptions import (
    InvalidArgumentError, GameAlreadyExistsError, GameNotFoundError
)
from catalog.core.repository import GameRepository
from catalog.models.domain.game import Game

logger = logging.getLogger(__name__)


class GameService:
    """Game catalog service

    Holds no state of its own between calls; everything lives in the
    repository it is given.
    """

    def __init__(self, repository: GameRepository, max_page_size: Optional[int] = None):
        self.game_repo = repository
        self.max_page_size = max_page_size or settings.MAX_PAGE_SIZE

    async def list_games(self, page: int, page_size: int) -> List[Game]:
        """
        Return one page of games ordered by (name, producer)

        Args:
            page: 1-based page number
            page_size: items per page, between 1 and the configured maximum

        Returns:
            List[Game]: games on the page; empty once past the last page

        Raises:
            InvalidArgumentError: page or page_size out of range
        """
        if page < 1:
            raise InvalidArgumentError("page", f"page must be >= 1, got {page}")
        if not 1 <= page_size <= self.max_page_size:
            raise InvalidArgumentError(
                "page_size", f"page_size must be between 1 and {self.max_page_size}, got {page_size}"
            )
        return await self.game_repo.find_page(page, page_size)

    async def get_game(self, game_id: UUID) -> Optional[Game]:
        """
        Look up a game by ID

        Returns:
            Optional[Game]: the game, or None when no game has this ID
        """
        return await self.game_repo.get_by_id(game_id)

    async def create_game(self, name: str, producer: str, price: float) -> Game:
        """
        Register a new game

        Args:
            name: game name
            producer: producer name
            price: non-negative price

        Returns:
            Game: the stored game with its assigned ID

        Raises:
            InvalidArgumentError: empty name/producer or invalid price
            GameAlreadyExistsError: a game with this name and producer exists
        """
        self._validate_details(name, producer, price)

        existing = await self.game_repo.get_by_name_and_producer(name, producer)
        if existing is not None:
            logger.info(f"Rejected duplicate game '{name}' by '{producer}' (existing id {existing.id})")
            raise GameAlreadyExistsError(name, producer)

        game = Game(id=uuid4(), name=name, producer=producer, price=price)
        # The repository enforces uniqueness again at write time for concurrent inserts
        created = await self.game_repo.insert(game)
        logger.info(f"Game created: {created.id} '{name}' by '{producer}'")
        return created

    async def replace_game(self, game_id: UUID, name: str, producer: str, price: float) -> None:
        """
        Overwrite name, producer and price of an existing game

        Raises:
            InvalidArgumentError: empty name/producer or invalid price
            GameNotFoundError: no game with this ID
            GameAlreadyExistsError: another game already uses the new name and producer
        """
        self._validate_details(name, producer, price)
        game = await self._get_or_raise(game_id)

        if (name, producer) != game.fingerprint:
            clash = await self.game_repo.get_by_name_and_producer(name, producer)
            if clash is not None and clash.id != game.id:
                logger.info(f"Rejected rename of game {game_id} to '{name}' by '{producer}' (taken by {clash.id})")
                raise GameAlreadyExistsError(name, producer)

        game.name = name
        game.producer = producer
        game.price = price
        await self.game_repo.update(game)
        logger.info(f"Game updated: {game_id}")

    async def update_price(self, game_id: UUID, price: float) -> None:
        """
        Change only the price of an existing game

        Raises:
            InvalidArgumentError: negative or non-finite price
            GameNotFoundError: no game with this ID
        """
        self._validate_price(price)
        game = await self._get_or_raise(game_id)
        game.price = price
        await self.game_repo.update(game)
        logger.info(f"Game price updated: {game_id} -> {price}")

    async def delete_game(self, game_id: UUID) -> None:
        """
        Permanently remove a game

        Raises:
            GameNotFoundError: no game with this ID
        """
        await self._get_or_raise(game_id)
        await self.game_repo.delete(game_id)
        logger.info(f"Game deleted: {game_id}")

    async def _get_or_raise(self, game_id: UUID) -> Game:
        game = await self.game_repo.get_by_id(game_id)
        if game is None:
            logger.warning(f"Game not found: {game_id}")
            raise GameNotFoundError(game_id)
        return game

    def _validate_details(self, name: str, producer: str, price: float) -> None:
        if not name or not name.strip():
            raise InvalidArgumentError("name", "name must not be empty")
        if not producer or not producer.strip():
            raise InvalidArgumentError("producer", "producer must not be empty")
        self._validate_price(price)

    @staticmethod
    def _validate_price(price: float) -> None:
        if price is None or math.isnan(price) or math.isinf(price):
            raise InvalidArgumentError("price", f"price must be a finite number, got {price}")
        if price < 0:
            raise InvalidArgumentError("price", f"price must not be negative, got {price}")
