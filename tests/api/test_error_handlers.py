"""Error Handlers — catch-all never leaks internals.

Design Decisions:
    - Built on a throwaway FastAPI app with only the error handlers, so the
      shared application never gains the failing route
    - raise_app_exceptions=False: Starlette re-raises after rendering the 500
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from inventory.api.error_handlers import register_error_handlers
from inventory.core.errors import MissingFieldError


@pytest.fixture
async def bare_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/explode")
    async def explode():
        raise KeyError("secret internal detail")

    @app.get("/reject")
    async def reject():
        raise MissingFieldError("id")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unhandled_exception_returns_generic_500(bare_client):
    res = await bare_client.get("/explode")
    assert res.status_code == 500
    assert res.json() == {"error": "internal error"}
    assert "secret" not in res.text


async def test_inventory_error_rendered_with_its_status(bare_client):
    res = await bare_client.get("/reject")
    assert res.status_code == 400
    assert res.json() == {"error": "'id' field required"}
