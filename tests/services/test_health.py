"""Health Probes — liveness always up, readiness follows DB connectivity."""

import price_resolver.infrastructure.database as db_module
from price_resolver import __version__
from price_resolver.infrastructure.database import DatabaseSessionManager


async def test_liveness_returns_service_info(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "price-resolver-api",
        "version": __version__,
    }


async def test_readiness_with_reachable_db(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_db_manager(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_reports_prices_table(client):
    res = await client.get("/api/v1/health/ready")
    assert res.json()["checks"]["prices_table"] == "healthy"


async def test_readiness_without_prices_table(client):
    # Reachable database that was never migrated
    unmigrated = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    db_module.db_manager = unmigrated
    try:
        res = await client.get("/api/v1/health/ready")
    finally:
        await unmigrated.dispose()
    assert res.status_code == 503
    assert res.json()["reason"] == "prices_table_unavailable"
