"""Service test fixtures - async DB, stores and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness check sees the test engine
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from marine_registry.db.base import Base
from marine_registry.infrastructure.database import get_db, DatabaseSessionManager
import marine_registry.infrastructure.database as db_module
from marine_registry.main import app
from marine_registry.services.marine_specie_store import MarineSpecieStore
from marine_registry.services.taxonomy_store import TaxonomyStore

CLOWNFISH_TAXONOMY = {
    "kingdom": "Animalia",
    "phylum": "Chordata",
    "taxon_class": "Actinopterygii",
    "order": "Perciformes",
    "family": "Pomacentridae",
    "genus": "Amphiprion",
    "species": "ocellaris",
}

KELP_TAXONOMY = {
    "kingdom": "Chromista",
    "phylum": "Ochrophyta",
    "taxon_class": "Phaeophyceae",
    "order": "Laminariales",
    "family": "Laminariaceae",
    "genus": "Macrocystis",
    "species": "pyrifera",
}


@pytest.fixture
def clownfish_fields():
    return dict(CLOWNFISH_TAXONOMY)


@pytest.fixture
def kelp_fields():
    return dict(KELP_TAXONOMY)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def taxonomy_store(test_db):
    return TaxonomyStore(test_db)


@pytest.fixture
def specie_store(test_db, taxonomy_store):
    return MarineSpecieStore(test_db, taxonomy_store)


@pytest.fixture
async def clownfish_taxonomy(taxonomy_store, clownfish_fields):
    return await taxonomy_store.add(clownfish_fields)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
