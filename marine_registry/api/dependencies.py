"""Store Dependencies - build per-request stores around the request's DB session.

Invariants:
    - Both stores in one request share a single AsyncSession (FastAPI caches get_db)
    - Stores are never module-level singletons
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marine_registry.infrastructure.database import get_db
from marine_registry.services.marine_specie_store import MarineSpecieStore
from marine_registry.services.taxonomy_store import TaxonomyStore


async def get_taxonomy_store(db: AsyncSession = Depends(get_db)) -> TaxonomyStore:
    return TaxonomyStore(db)


async def get_marine_specie_store(
    taxonomies: TaxonomyStore = Depends(get_taxonomy_store),
) -> MarineSpecieStore:
    return MarineSpecieStore(taxonomies.db, taxonomies)
