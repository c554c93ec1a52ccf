"""Taxonomy Routes - CRUD and class search over the taxonomy store.

Invariants:
    - operation_id of each route is the public operation name
    - Static paths (/search/...) are registered before /{taxonomy_id}
    - Missing ids surface as 404 NotFound via the global error handler
"""

from fastapi import APIRouter, Depends, Query, status

from marine_registry.api.dependencies import get_taxonomy_store
from marine_registry.core.domain_types import TaxonomyId
from marine_registry.schemas.taxonomy import (
    TaxonomyPayload, TaxonomyResponse, TaxonomyUpdate,
)
from marine_registry.services.taxonomy_store import TaxonomyStore

router = APIRouter(prefix="/api/v1/taxonomies", tags=["taxonomies"])


@router.get(
    "", response_model=list[TaxonomyResponse], operation_id="getTaxonomies",
)
async def get_taxonomies(store: TaxonomyStore = Depends(get_taxonomy_store)):
    """All taxonomies in key order."""
    return await store.list_all()


@router.get(
    "/search/class", response_model=list[TaxonomyResponse],
    operation_id="searchTaxonomiesByClass",
)
async def search_taxonomies_by_class(
    text: str = Query(...),
    store: TaxonomyStore = Depends(get_taxonomy_store),
):
    return await store.search_by_class(text)


@router.get(
    "/{taxonomy_id}", response_model=TaxonomyResponse,
    operation_id="getTaxonomy",
)
async def get_taxonomy(
    taxonomy_id: TaxonomyId, store: TaxonomyStore = Depends(get_taxonomy_store),
):
    return await store.get(taxonomy_id)


@router.post(
    "", response_model=TaxonomyResponse,
    status_code=status.HTTP_201_CREATED, operation_id="addTaxonomy",
)
async def add_taxonomy(
    body: TaxonomyPayload, store: TaxonomyStore = Depends(get_taxonomy_store),
):
    return await store.add(body.model_dump())


@router.patch(
    "/{taxonomy_id}", response_model=TaxonomyResponse,
    operation_id="updateTaxonomy",
)
async def update_taxonomy(
    taxonomy_id: TaxonomyId,
    body: TaxonomyUpdate,
    store: TaxonomyStore = Depends(get_taxonomy_store),
):
    """Partial update: fields left out of the body keep their value."""
    return await store.update(taxonomy_id, body.changed_fields())


@router.delete(
    "/{taxonomy_id}", response_model=TaxonomyResponse,
    operation_id="deleteTaxonomy",
)
async def delete_taxonomy(
    taxonomy_id: TaxonomyId, store: TaxonomyStore = Depends(get_taxonomy_store),
):
    """Remove and return the taxonomy. Species keep their snapshot."""
    return await store.delete(taxonomy_id)
