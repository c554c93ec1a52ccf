"""Health routes - liveness always up, readiness follows the database and schema."""

import marine_registry.infrastructure.database as db_module
from marine_registry.db.base import Base


async def test_liveness_returns_healthy(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_lists_both_stores(client):
    res = await client.get("/api/v1/health/ready")
    assert res.json()["checks"]["stores"] == ["marine_species", "taxonomies"]


async def test_readiness_without_schema_returns_503(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "schema_missing"
    assert res.json()["missing_tables"] == ["marine_species", "taxonomies"]
