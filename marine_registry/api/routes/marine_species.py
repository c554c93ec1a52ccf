"""Marine Species Routes - CRUD, taxonomy association and derived listings.

Invariants:
    - operation_id of each route is the public operation name
    - Static paths (/sorted/..., /search/...) are registered before /{specie_id}
    - addMarineSpecie requires an existing taxonomy_id (404 otherwise, nothing stored)
    - DELETE /{specie_id}/taxonomy/{taxonomy_id} replaces the snapshot with that
      taxonomy; it does not clear it
"""

from fastapi import APIRouter, Depends, Query, status

from marine_registry.api.dependencies import get_marine_specie_store
from marine_registry.core.domain_types import (
    MarineSpecieId, SortDirection, TaxonomyId,
)
from marine_registry.schemas.marine_specie import (
    DescriptionUpdate,
    MarineSpeciePayload,
    MarineSpecieResponse,
    MarineSpecieUpdate,
    NameUpdate,
)
from marine_registry.services.marine_specie_store import MarineSpecieStore

router = APIRouter(prefix="/api/v1/marine-species", tags=["marine-species"])

_Species = list[MarineSpecieResponse]


# ─── Reads ──────────────────────────────────────────────────────

@router.get("", response_model=_Species, operation_id="getMarineSpecies")
async def get_marine_species(
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.list_all()


@router.get(
    "/sorted/kingdom", response_model=_Species,
    operation_id="sortMarineSpeciesByTaxonomyKingdom",
)
async def sort_by_kingdom(
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.sort_by_kingdom(SortDirection.ASC)


@router.get(
    "/sorted/kingdom-desc", response_model=_Species,
    operation_id="sortMarineSpeciesByTaxonomyKingdomDesc",
)
async def sort_by_kingdom_desc(
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.sort_by_kingdom(SortDirection.DESC)


@router.get(
    "/sorted/created-at", response_model=_Species,
    operation_id="sortMarineSpeciesByTimeOfCreation",
)
async def sort_by_creation_time(
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.sort_by_creation_time()


@router.get(
    "/search/kingdom-or-phylum", response_model=_Species,
    operation_id="searchMarineSpeciesByTaxonomyKingdomOrPhylum",
)
async def search_by_kingdom_or_phylum(
    text: str = Query(...),
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    """Exact, case-insensitive match on the snapshot kingdom or phylum."""
    return await store.search_by_kingdom_or_phylum(text)


@router.get(
    "/search/name", response_model=_Species,
    operation_id="searchMarineSpeciesByName",
)
async def search_by_name(
    text: str = Query(...),
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.search_by_name(text)


@router.get(
    "/search/genus", response_model=_Species,
    operation_id="searchMarineSpeciesByGenus",
)
async def search_by_genus(
    text: str = Query(...),
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.search_by_genus(text)


@router.get(
    "/{specie_id}", response_model=MarineSpecieResponse,
    operation_id="getMarineSpecie",
)
async def get_marine_specie(
    specie_id: MarineSpecieId,
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.get(specie_id)


# ─── Mutations ──────────────────────────────────────────────────

@router.post(
    "", response_model=MarineSpecieResponse,
    status_code=status.HTTP_201_CREATED, operation_id="addMarineSpecie",
)
async def add_marine_specie(
    body: MarineSpeciePayload,
    taxonomy_id: TaxonomyId = Query(...),
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.add(taxonomy_id, body.model_dump())


@router.patch(
    "/{specie_id}", response_model=MarineSpecieResponse,
    operation_id="updateMarineSpecie",
)
async def update_marine_specie(
    specie_id: MarineSpecieId,
    body: MarineSpecieUpdate,
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.update(specie_id, body.changed_fields())


@router.put(
    "/{specie_id}/name", response_model=MarineSpecieResponse,
    operation_id="updateMarineSpecieName",
)
async def update_marine_specie_name(
    specie_id: MarineSpecieId,
    body: NameUpdate,
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.update_name(specie_id, body.name)


@router.put(
    "/{specie_id}/description", response_model=MarineSpecieResponse,
    operation_id="updateMarineSpecieDescription",
)
async def update_marine_specie_description(
    specie_id: MarineSpecieId,
    body: DescriptionUpdate,
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.update_description(specie_id, body.description)


@router.delete(
    "/{specie_id}", response_model=MarineSpecieResponse,
    operation_id="deleteMarineSpecie",
)
async def delete_marine_specie(
    specie_id: MarineSpecieId,
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.delete(specie_id)


@router.put(
    "/{specie_id}/taxonomy/{taxonomy_id}", response_model=MarineSpecieResponse,
    operation_id="addTaxonomyToMarineSpecie",
)
async def add_taxonomy_to_marine_specie(
    specie_id: MarineSpecieId,
    taxonomy_id: TaxonomyId,
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.add_taxonomy(specie_id, taxonomy_id)


@router.delete(
    "/{specie_id}/taxonomy/{taxonomy_id}", response_model=MarineSpecieResponse,
    operation_id="removeTaxonomyFromMarineSpecie",
)
async def remove_taxonomy_from_marine_specie(
    specie_id: MarineSpecieId,
    taxonomy_id: TaxonomyId,
    store: MarineSpecieStore = Depends(get_marine_specie_store),
):
    return await store.remove_taxonomy(specie_id, taxonomy_id)
