import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from catalog.core.exceptions import GameAlreadyExistsError
from catalog.core.repository import GameRepository
from catalog.models.domain.game import Game


def _copy(game: Game) -> Game:
    return Game(
        id=game.id,
        name=game.name,
        producer=game.producer,
        price=game.price,
        created_at=game.created_at,
        updated_at=game.updated_at,
    )


class InMemoryGameRepository(GameRepository):
    """In-memory storage for games.

    Stores detached copies so callers cannot mutate state without going
    through `update`. Fingerprint checks and writes run under one lock.
    """

    def __init__(self) -> None:
        self._games: Dict[UUID, Game] = {}
        self._lock = asyncio.Lock()

    async def find_page(self, page: int, page_size: int) -> List[Game]:
        async with self._lock:
            ordered = sorted(self._games.values(), key=lambda g: (g.name, g.producer))
        start = (page - 1) * page_size
        return [_copy(game) for game in ordered[start:start + page_size]]

    async def get_by_id(self, game_id: UUID) -> Optional[Game]:
        async with self._lock:
            game = self._games.get(game_id)
        return _copy(game) if game is not None else None

    async def get_by_name_and_producer(self, name: str, producer: str) -> Optional[Game]:
        async with self._lock:
            game = self._find_fingerprint(name, producer)
        return _copy(game) if game is not None else None

    async def insert(self, game: Game) -> Game:
        async with self._lock:
            if self._find_fingerprint(game.name, game.producer) is not None:
                raise GameAlreadyExistsError(game.name, game.producer)
            now = datetime.now(timezone.utc)
            stored = _copy(game)
            stored.created_at = now
            stored.updated_at = now
            self._games[stored.id] = stored
        return _copy(stored)

    async def update(self, game: Game) -> None:
        async with self._lock:
            existing = self._find_fingerprint(game.name, game.producer)
            if existing is not None and existing.id != game.id:
                raise GameAlreadyExistsError(game.name, game.producer)
            stored = _copy(game)
            stored.updated_at = datetime.now(timezone.utc)
            self._games[stored.id] = stored

    async def delete(self, game_id: UUID) -> None:
        async with self._lock:
            self._games.pop(game_id, None)

    def _find_fingerprint(self, name: str, producer: str) -> Optional[Game]:
        for game in self._games.values():
            if game.name == name and game.producer == producer:
                return game
        return None
