"""Taxonomy Store - ordered id -> Taxonomy mapping over one AsyncSession.

Invariants:
    - list_all() returns every record in key (id) order
    - add() assigns the id and both timestamps; callers never supply them
    - update() merges given fields over the stored record (partial update) and
      checks the payload before the id lookup
    - delete() does not cascade: species keep their embedded snapshot
    - Every mutation commits before returning

Design Decisions:
    - Constructed per request around the request's session (dependency injection),
      no module-level store state
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marine_registry.core.derived_views import search_by_class
from marine_registry.core.domain_types import TAXONOMY_FIELDS, TaxonomyId
from marine_registry.core.errors import ResourceNotFoundError
from marine_registry.core.record_fields import check_new_fields, check_update_fields
from marine_registry.core.timestamps import restamp, utc_now_iso
from marine_registry.models.taxonomy import Taxonomy

logger = logging.getLogger(__name__)


class TaxonomyStore:
    """CRUD and class search for Taxonomy records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Taxonomy]:
        result = await self.db.execute(select(Taxonomy).order_by(Taxonomy.id))
        return list(result.scalars().all())

    async def find(self, taxonomy_id: TaxonomyId) -> Taxonomy | None:
        """Point lookup without raising."""
        return await self.db.get(Taxonomy, taxonomy_id)

    async def get(
        self, taxonomy_id: TaxonomyId, operation: str | None = None,
    ) -> Taxonomy:
        """Return the taxonomy or raise ResourceNotFoundError.

        operation, when given, is named in the error message
        (e.g. "cannot update the taxonomy: taxonomy with id=... not found").
        """
        taxonomy = await self.find(taxonomy_id)
        if taxonomy is None:
            raise ResourceNotFoundError("taxonomy", taxonomy_id, operation)
        return taxonomy

    async def add(self, fields: dict) -> Taxonomy:
        clean = check_new_fields(fields, TAXONOMY_FIELDS)
        stamp = utc_now_iso()
        taxonomy = Taxonomy(
            id=str(uuid.uuid4()), **clean, created_at=stamp, updated_at=stamp,
        )
        self.db.add(taxonomy)
        await self.db.commit()
        logger.info(
            f"Taxonomy {taxonomy.id} added",
            extra={"record_id": taxonomy.id, "operation": "addTaxonomy"},
        )
        return taxonomy

    async def update(self, taxonomy_id: TaxonomyId, fields: dict) -> Taxonomy:
        """Merge fields over the stored record. The payload is checked before the id."""
        clean = check_update_fields(fields, TAXONOMY_FIELDS)
        taxonomy = await self.get(taxonomy_id, "update the taxonomy")
        for name, value in clean.items():
            setattr(taxonomy, name, value)
        taxonomy.updated_at = restamp(taxonomy.created_at)
        await self.db.commit()
        logger.info(
            f"Taxonomy {taxonomy_id} updated ({', '.join(clean) or 'no fields'})",
            extra={"record_id": taxonomy_id, "operation": "updateTaxonomy"},
        )
        return taxonomy

    async def delete(self, taxonomy_id: TaxonomyId) -> Taxonomy:
        taxonomy = await self.get(taxonomy_id, "delete the taxonomy")
        await self.db.delete(taxonomy)
        await self.db.commit()
        logger.info(
            f"Taxonomy {taxonomy_id} deleted",
            extra={"record_id": taxonomy_id, "operation": "deleteTaxonomy"},
        )
        return taxonomy

    async def search_by_class(self, text: str) -> list[Taxonomy]:
        return search_by_class(await self.list_all(), text)
