from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from catalog.models.domain.game import Game


class GameRepository(ABC):
    """
    Storage boundary for games.

    Implementations own all persisted state. `insert` and `update` raise
    GameAlreadyExistsError when the write would break (name, producer)
    uniqueness; any other storage failure is raised as StorageError.
    """

    @abstractmethod
    async def find_page(self, page: int, page_size: int) -> List[Game]:
        """1-based page of games ordered by (name, producer)."""
        ...

    @abstractmethod
    async def get_by_id(self, game_id: UUID) -> Optional[Game]:
        ...

    @abstractmethod
    async def get_by_name_and_producer(self, name: str, producer: str) -> Optional[Game]:
        ...

    @abstractmethod
    async def insert(self, game: Game) -> Game:
        ...

    @abstractmethod
    async def update(self, game: Game) -> None:
        ...

    @abstractmethod
    async def delete(self, game_id: UUID) -> None:
        ...
