"""Health Checks — liveness always 200, readiness follows the DB check."""

from unittest.mock import AsyncMock

import employee_api.infrastructure.database as db_module


def _manager(healthy: bool) -> AsyncMock:
    manager = AsyncMock()
    manager.health_check.return_value = healthy
    return manager


async def test_liveness_at_bare_prefix(client):
    res = await client.get("/api/v1/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "service": "employee-records-api"}


async def test_readiness_without_db_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    body = res.json()
    assert body["reason"] == "database_unavailable"
    assert body["checks"] == {"database": "unavailable"}


async def test_readiness_with_failing_db_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", _manager(False))
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["status"] == "not_ready"


async def test_readiness_with_healthy_db(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", _manager(True))
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}
