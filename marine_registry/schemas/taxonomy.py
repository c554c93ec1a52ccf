"""Taxonomy Schemas - create/update payloads and the public record shape."""

from pydantic import BaseModel, ConfigDict


class TaxonomyPayload(BaseModel):
    """addTaxonomy body: every classification field is required."""
    model_config = ConfigDict(extra="forbid")

    kingdom: str
    phylum: str
    taxon_class: str
    order: str
    family: str
    genus: str
    species: str


class TaxonomyUpdate(BaseModel):
    """updateTaxonomy body: omitted fields keep their stored value; null is rejected."""
    model_config = ConfigDict(extra="forbid")

    kingdom: str | None = None
    phylum: str | None = None
    taxon_class: str | None = None
    order: str | None = None
    family: str | None = None
    genus: str | None = None
    species: str | None = None

    def changed_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaxonomyResponse(BaseModel):
    """Taxonomy record as returned by every taxonomy operation."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    kingdom: str
    phylum: str
    taxon_class: str
    order: str
    family: str
    genus: str
    species: str
    created_at: str
    updated_at: str
