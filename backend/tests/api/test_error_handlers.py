"""Error Handlers — verifies the registered handlers on a throwaway app.

Tests:
    - Domain errors render their own message and status
    - Storage and unexpected errors render 500 with the generic message only
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from employee_api.api.error_handlers import register_error_handlers
from employee_api.core.errors import (
    GENERIC_ERROR_MESSAGE, BusinessRuleError, DatabaseError,
)


@pytest.fixture
async def failing_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/rule")
    async def rule():
        raise BusinessRuleError("Rule broken")

    @app.get("/db")
    async def db():
        raise DatabaseError("connection refused on 10.0.0.5", "execute")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internal detail")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_business_rule_error_returns_400(failing_client):
    res = await failing_client.get("/rule")
    assert res.status_code == 400
    assert res.json()["message"] == "Rule broken"
    assert res.json()["status"] == 400


async def test_database_error_returns_generic_500(failing_client):
    res = await failing_client.get("/db")
    assert res.status_code == 500
    assert res.json()["message"] == GENERIC_ERROR_MESSAGE
    assert "10.0.0.5" not in res.text


async def test_unexpected_error_returns_generic_500(failing_client):
    res = await failing_client.get("/boom")
    assert res.status_code == 500
    body = res.json()
    assert body["message"] == GENERIC_ERROR_MESSAGE
    assert body["status"] == 500
    assert "secret" not in res.text
