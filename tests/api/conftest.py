"""API test fixtures — fresh app per test + async HTTP client.

Invariants:
    - Every test gets its own create_app(), so stores never leak between tests
    - Requests go through the full ASGI stack (middleware, validation, handlers)

Design Decisions:
    - httpx.AsyncClient over ASGITransport: no server process, same code path as uvicorn
"""

import pytest
from httpx import ASGITransport, AsyncClient

from typed_api.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def stores(app):
    return app.state.stores


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def create_user(client):
    """POST a user and return the stored record's id."""

    async def _create(**overrides) -> str:
        body = {"name": "Ana", "email": "ana@x.com", "userType": "admin"}
        body.update(overrides)
        res = await client.post("/users", json=body)
        assert res.status_code == 201
        listing = (await client.get("/users")).json()
        return listing[-1]["id"]

    return _create
