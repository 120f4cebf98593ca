from typing import Dict, List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response, status

from catalog.core.dependencies import common_pagination_params
from catalog.core.schemas import ErrorResponse
from catalog.games.dependencies import get_game_service
from catalog.schemas.game import GameInput, GameView
from catalog.services.game.game_service import GameService

router = APIRouter(tags=["Games"]) # Prefix handled in main.py

NOT_FOUND_RESPONSE = {"model": ErrorResponse, "description": "No game with this ID"}


@router.get(
    "",
    response_model=List[GameView],
    summary="List games",
    description="""
    Returns one page of the catalog ordered by name, then producer.
    Games cannot be fetched without pagination.
    """,
    responses={
        status.HTTP_200_OK: {"description": "Games on the requested page"},
        status.HTTP_204_NO_CONTENT: {"description": "No games on the requested page"},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse, "description": "Invalid pagination parameters"},
    }
)
async def list_games(
    pagination: Dict[str, int] = Depends(common_pagination_params),
    game_service: GameService = Depends(get_game_service),
):
    games = await game_service.list_games(pagination["page"], pagination["page_size"])
    if not games:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [GameView.model_validate(game) for game in games]


@router.get(
    "/{game_id}",
    response_model=GameView,
    summary="Get a game by ID",
    responses={
        status.HTTP_200_OK: {"description": "The requested game"},
        status.HTTP_204_NO_CONTENT: {"description": "No game with this ID"},
    }
)
async def get_game(
    game_id: UUID = Path(..., description="ID of the game to fetch"),
    game_service: GameService = Depends(get_game_service),
):
    game = await game_service.get_game(game_id)
    if game is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return GameView.model_validate(game)


@router.post(
    "",
    response_model=GameView,
    summary="Register a new game",
    responses={
        status.HTTP_200_OK: {"description": "Game registered"},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {
            "model": ErrorResponse,
            "description": "A game with this name already exists for this producer, or the body is invalid"
        },
    }
)
async def create_game(
    game_in: GameInput,
    game_service: GameService = Depends(get_game_service),
):
    game = await game_service.create_game(game_in.name, game_in.producer, game_in.price)
    return GameView.model_validate(game)


@router.put(
    "/{game_id}",
    status_code=status.HTTP_200_OK,
    summary="Replace a game",
    description="Overwrites name, producer and price of the game with this ID.",
    responses={
        status.HTTP_404_NOT_FOUND: NOT_FOUND_RESPONSE,
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse, "description": "Duplicate name/producer or invalid body"},
    }
)
async def replace_game(
    game_in: GameInput,
    game_id: UUID = Path(..., description="ID of the game to update"),
    game_service: GameService = Depends(get_game_service),
) -> None:
    await game_service.replace_game(game_id, game_in.name, game_in.producer, game_in.price)


@router.patch(
    "/{game_id}/price/{price}",
    status_code=status.HTTP_200_OK,
    summary="Update only the price of a game",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Negative price"},
        status.HTTP_404_NOT_FOUND: NOT_FOUND_RESPONSE,
    }
)
async def update_game_price(
    game_id: UUID = Path(..., description="ID of the game to update"),
    price: float = Path(..., description="New price"),
    game_service: GameService = Depends(get_game_service),
) -> None:
    await game_service.update_price(game_id, price)


@router.delete(
    "/{game_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete a game",
    responses={status.HTTP_404_NOT_FOUND: NOT_FOUND_RESPONSE}
)
async def delete_game(
    game_id: UUID = Path(..., description="ID of the game to delete"),
    game_service: GameService = Depends(get_game_service),
) -> None:
    await game_service.delete_game(game_id)
