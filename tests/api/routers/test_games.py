# tests/api/routers/test_games.py
import pytest
from uuid import uuid4
from fastapi import status
from httpx import AsyncClient, ASGITransport

from catalog.core.config import settings
from catalog.core.exceptions import StorageError
from catalog.games.dependencies import get_game_repository
from catalog.main import app as main_app
from catalog.repositories.memory_game_repository import InMemoryGameRepository

GAMES_URL = f"{settings.API_V1_PREFIX}/games"

CHRONO = {"name": "Chrono Trigger", "producer": "Square", "price": 9.99}


async def create(client, **overrides):
    payload = {**CHRONO, **overrides}
    response = await client.post(GAMES_URL, json=payload)
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()


# --- List ---

@pytest.mark.asyncio
async def test_list_empty_catalog_returns_no_content(client):
    response = await client.get(GAMES_URL)
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""


@pytest.mark.asyncio
async def test_list_uses_default_page_size(client):
    for i in range(7):
        await create(client, name=f"Game {i}")

    response = await client.get(GAMES_URL)

    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()) == settings.DEFAULT_PAGE_SIZE


@pytest.mark.asyncio
async def test_list_second_page(client):
    for i in range(7):
        await create(client, name=f"Game {i}")

    response = await client.get(GAMES_URL, params={"page": 2, "page_size": 5})

    assert response.status_code == status.HTTP_200_OK
    assert [g["name"] for g in response.json()] == ["Game 5", "Game 6"]


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"page": 0}, {"page_size": 0}, {"page_size": 51}, {"page": "abc"}])
async def test_list_rejects_invalid_pagination(client, params):
    response = await client.get(GAMES_URL, params=params)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    body = response.json()
    assert body["error_code"] == "request_validation_error"
    assert body["details"]


# --- Get by id ---

@pytest.mark.asyncio
async def test_get_existing_game(client):
    created = await create(client)

    response = await client.get(f"{GAMES_URL}/{created['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_missing_game_returns_no_content(client):
    response = await client.get(f"{GAMES_URL}/{uuid4()}")
    assert response.status_code == status.HTTP_204_NO_CONTENT


@pytest.mark.asyncio
async def test_get_with_malformed_id(client):
    response = await client.get(f"{GAMES_URL}/not-a-uuid")
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


# --- Create ---

@pytest.mark.asyncio
async def test_create_returns_game_with_id(client):
    created = await create(client)

    assert created["id"]
    assert {k: created[k] for k in CHRONO} == CHRONO


@pytest.mark.asyncio
async def test_create_duplicate_is_unprocessable(client):
    await create(client)

    response = await client.post(GAMES_URL, json=CHRONO)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    body = response.json()
    assert body["error_code"] == "game_already_exists"
    assert body["message"] == "A game with this name already exists for this producer"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"name": "", "producer": "Square", "price": 1.0},
    {"name": "   ", "producer": "Square", "price": 1.0},
    {"name": "Chrono Trigger", "producer": "Square", "price": -1.0},
    {"name": "Chrono Trigger", "price": 1.0},
])
async def test_create_rejects_invalid_body(client, payload):
    response = await client.post(GAMES_URL, json=payload)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


# --- Replace ---

@pytest.mark.asyncio
async def test_replace_then_read(client):
    created = await create(client)

    response = await client.put(
        f"{GAMES_URL}/{created['id']}", json={"name": "X", "producer": "Y", "price": 19.99}
    )
    assert response.status_code == status.HTTP_200_OK

    fetched = (await client.get(f"{GAMES_URL}/{created['id']}")).json()
    assert fetched == {"id": created["id"], "name": "X", "producer": "Y", "price": 19.99}


@pytest.mark.asyncio
async def test_replace_missing_game(client):
    response = await client.put(f"{GAMES_URL}/{uuid4()}", json=CHRONO)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Game does not exist"


@pytest.mark.asyncio
async def test_replace_into_existing_fingerprint(client):
    await create(client)
    other = await create(client, name="Secret of Mana")

    response = await client.put(f"{GAMES_URL}/{other['id']}", json=CHRONO)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["error_code"] == "game_already_exists"


# --- Price ---

@pytest.mark.asyncio
async def test_update_price(client):
    created = await create(client)

    response = await client.patch(f"{GAMES_URL}/{created['id']}/price/5.0")
    assert response.status_code == status.HTTP_200_OK

    fetched = (await client.get(f"{GAMES_URL}/{created['id']}")).json()
    assert fetched["price"] == 5.0
    assert (fetched["name"], fetched["producer"]) == ("Chrono Trigger", "Square")


@pytest.mark.asyncio
async def test_update_price_missing_game(client):
    response = await client.patch(f"{GAMES_URL}/{uuid4()}/price/5.0")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error_code"] == "game_not_found"


@pytest.mark.asyncio
async def test_update_price_negative(client):
    created = await create(client)

    response = await client.patch(f"{GAMES_URL}/{created['id']}/price/-3.5")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error_code"] == "invalid_argument"


# --- Delete ---

@pytest.mark.asyncio
async def test_delete_then_get(client):
    created = await create(client)

    response = await client.delete(f"{GAMES_URL}/{created['id']}")
    assert response.status_code == status.HTTP_200_OK

    assert (await client.get(f"{GAMES_URL}/{created['id']}")).status_code == status.HTTP_204_NO_CONTENT
    assert (await client.get(GAMES_URL)).status_code == status.HTTP_204_NO_CONTENT


@pytest.mark.asyncio
async def test_delete_missing_game(client):
    response = await client.delete(f"{GAMES_URL}/{uuid4()}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


# --- Tracing ---

@pytest.mark.asyncio
async def test_trace_header_is_echoed(client):
    response = await client.get(GAMES_URL, headers={settings.TRACE_HEADER: "trace-123"})
    assert response.headers[settings.TRACE_HEADER] == "trace-123"


@pytest.mark.asyncio
async def test_trace_header_is_generated(client):
    response = await client.get(GAMES_URL)
    assert response.headers.get(settings.TRACE_HEADER)


# --- Storage failures ---

class UnavailableRepository(InMemoryGameRepository):
    async def find_page(self, page, page_size):
        raise StorageError("connection lost")


@pytest.mark.asyncio
async def test_storage_error_maps_to_internal_error():
    main_app.dependency_overrides[get_game_repository] = lambda: UnavailableRepository()
    transport = ASGITransport(app=main_app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get(GAMES_URL)
    finally:
        main_app.dependency_overrides.clear()

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "An unexpected storage error occurred.", "error_code": "storage_error"}
