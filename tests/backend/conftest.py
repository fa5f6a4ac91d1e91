import os
import uuid

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from taskhub.config import settings
from taskhub.core import db as db_module
from taskhub.main import app


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def register_user(client):
    """
    Factory fixture: register an account through the API and return its id,
    credentials and a ready-made Cookie header.

    The client's cookie jar is cleared afterwards so requests only carry the
    session a test passes explicitly.
    """

    async def _register(name: str = "test user", password: str = "password") -> dict:
        email = f"user_{uuid.uuid4().hex[:8]}@example.com"
        resp = await client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        token = resp.cookies[settings.cookie_name]
        client.cookies.clear()
        return {
            "id": resp.json()["user"]["id"],
            "email": email,
            "password": password,
            "token": token,
            "headers": {"Cookie": f"{settings.cookie_name}={token}"},
        }

    return _register


@pytest_asyncio.fixture
async def create_collection(client):
    """
    Factory fixture: create a collection as the given user and return its id.
    """

    async def _create(user: dict, name: str = "Sprint") -> int:
        resp = await client.post("/collections", json={"name": name}, headers=user["headers"])
        assert resp.status_code == 201, resp.text
        return resp.json()["collection"]["id"]

    return _create


@pytest_asyncio.fixture
async def grant(client):
    """
    Factory fixture: as ``owner``, set ``member``'s rights on a collection.
    """

    async def _grant(owner: dict, member: dict, collection_id: int, **flags) -> dict:
        resp = await client.patch(
            f"/collections/{collection_id}/users/{member['id']}",
            json=flags,
            headers=owner["headers"],
        )
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _grant
