"""Marine Specie Store - ordered id -> MarineSpecie mapping plus derived views.

Invariants:
    - A species is only created against an existing taxonomy; otherwise NotFound
      and nothing is written
    - The embedded taxonomy is a snapshot copied at add/association time and is
      only replaced by another association
    - add() and the update methods check the payload before any id lookup
      (InvalidPayload wins over NotFound)
    - Derived views rescan list_all() on every call

Design Decisions:
    - Shares the request session with its TaxonomyStore: the taxonomy read and
      the species write of add()/associate_taxonomy() commit as one transaction
    - add_taxonomy and remove_taxonomy both overwrite the snapshot with the given
      taxonomy. "remove" never clears it; clients depend on the current behaviour.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marine_registry.core import derived_views
from marine_registry.core.domain_types import (
    MARINE_SPECIE_FIELDS, MarineSpecieId, SortDirection, TaxonomyId,
)
from marine_registry.core.errors import ResourceNotFoundError
from marine_registry.core.record_fields import (
    check_new_fields, check_update_fields, taxonomy_snapshot,
)
from marine_registry.core.timestamps import restamp, utc_now_iso
from marine_registry.models.marine_specie import MarineSpecie
from marine_registry.services.taxonomy_store import TaxonomyStore

logger = logging.getLogger(__name__)


class MarineSpecieStore:
    """CRUD, taxonomy association and derived listings for MarineSpecie records."""

    def __init__(self, db: AsyncSession, taxonomies: TaxonomyStore):
        self.db = db
        self.taxonomies = taxonomies

    # ─── Primitives ──────────────────────────────────────────────

    async def list_all(self) -> list[MarineSpecie]:
        result = await self.db.execute(
            select(MarineSpecie).order_by(MarineSpecie.id),
        )
        return list(result.scalars().all())

    async def get(
        self, specie_id: MarineSpecieId, operation: str | None = None,
    ) -> MarineSpecie:
        specie = await self.db.get(MarineSpecie, specie_id)
        if specie is None:
            raise ResourceNotFoundError("marine specie", specie_id, operation)
        return specie

    async def add(self, taxonomy_id: TaxonomyId, fields: dict) -> MarineSpecie:
        clean = check_new_fields(fields, MARINE_SPECIE_FIELDS)
        taxonomy = await self.taxonomies.get(taxonomy_id, "add marine specie")
        stamp = utc_now_iso()
        specie = MarineSpecie(
            id=str(uuid.uuid4()),
            taxonomy=taxonomy_snapshot(taxonomy),
            **clean,
            created_at=stamp,
            updated_at=stamp,
        )
        self.db.add(specie)
        await self.db.commit()
        logger.info(
            f"Marine specie {specie.id} added under taxonomy {taxonomy_id}",
            extra={"record_id": specie.id, "operation": "addMarineSpecie"},
        )
        return specie

    async def update(self, specie_id: MarineSpecieId, fields: dict) -> MarineSpecie:
        clean = check_update_fields(fields, MARINE_SPECIE_FIELDS)
        specie = await self.get(specie_id, "update the marine specie")
        return await self._apply(specie, clean, "updateMarineSpecie")

    async def update_name(self, specie_id: MarineSpecieId, name: str) -> MarineSpecie:
        clean = check_update_fields({"name": name}, MARINE_SPECIE_FIELDS)
        specie = await self.get(specie_id, "update the marine specie")
        return await self._apply(specie, clean, "updateMarineSpecieName")

    async def update_description(
        self, specie_id: MarineSpecieId, description: str,
    ) -> MarineSpecie:
        clean = check_update_fields(
            {"description": description}, MARINE_SPECIE_FIELDS,
        )
        specie = await self.get(specie_id, "update the marine specie")
        return await self._apply(specie, clean, "updateMarineSpecieDescription")

    async def delete(self, specie_id: MarineSpecieId) -> MarineSpecie:
        specie = await self.get(specie_id, "delete the marine specie")
        await self.db.delete(specie)
        await self.db.commit()
        logger.info(
            f"Marine specie {specie_id} deleted",
            extra={"record_id": specie_id, "operation": "deleteMarineSpecie"},
        )
        return specie

    # ─── Association ─────────────────────────────────────────────

    async def add_taxonomy(
        self, specie_id: MarineSpecieId, taxonomy_id: TaxonomyId,
    ) -> MarineSpecie:
        return await self._associate(
            specie_id, taxonomy_id,
            "add taxonomy to marine specie", "addTaxonomyToMarineSpecie",
        )

    async def remove_taxonomy(
        self, specie_id: MarineSpecieId, taxonomy_id: TaxonomyId,
    ) -> MarineSpecie:
        """Overwrite the snapshot with taxonomy_id's current state (does not clear)."""
        return await self._associate(
            specie_id, taxonomy_id,
            "remove taxonomy from marine specie", "removeTaxonomyFromMarineSpecie",
        )

    async def _associate(
        self, specie_id: MarineSpecieId, taxonomy_id: TaxonomyId,
        action: str, operation: str,
    ) -> MarineSpecie:
        specie = await self.get(specie_id, action)
        taxonomy = await self.taxonomies.get(taxonomy_id, action)
        specie.taxonomy = taxonomy_snapshot(taxonomy)
        specie.updated_at = restamp(specie.created_at)
        await self.db.commit()
        logger.info(
            f"Marine specie {specie_id} now carries taxonomy {taxonomy_id}",
            extra={"record_id": specie_id, "operation": operation},
        )
        return specie

    async def _apply(
        self, specie: MarineSpecie, clean: dict, operation: str,
    ) -> MarineSpecie:
        for name, value in clean.items():
            setattr(specie, name, value)
        specie.updated_at = restamp(specie.created_at)
        await self.db.commit()
        logger.info(
            f"Marine specie {specie.id} updated ({', '.join(clean) or 'no fields'})",
            extra={"record_id": specie.id, "operation": operation},
        )
        return specie

    # ─── Derived views ───────────────────────────────────────────

    async def sort_by_kingdom(
        self, direction: SortDirection = SortDirection.ASC,
    ) -> list[MarineSpecie]:
        return derived_views.sort_by_kingdom(await self.list_all(), direction)

    async def sort_by_creation_time(self) -> list[MarineSpecie]:
        return derived_views.sort_by_creation_time(await self.list_all())

    async def search_by_kingdom_or_phylum(self, text: str) -> list[MarineSpecie]:
        return derived_views.search_by_kingdom_or_phylum(await self.list_all(), text)

    async def search_by_name(self, text: str) -> list[MarineSpecie]:
        return derived_views.search_by_name(await self.list_all(), text)

    async def search_by_genus(self, text: str) -> list[MarineSpecie]:
        return derived_views.search_by_genus(await self.list_all(), text)
