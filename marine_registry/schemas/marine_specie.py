"""Marine Specie Schemas - payloads, single-field bodies and the record shape.

Invariants:
    - MarineSpecieResponse.taxonomy is the embedded snapshot, same shape as a
      TaxonomyResponse
"""

from pydantic import BaseModel, ConfigDict

from marine_registry.schemas.taxonomy import TaxonomyResponse


class MarineSpeciePayload(BaseModel):
    """addMarineSpecie body."""
    model_config = ConfigDict(extra="forbid")

    name: str
    description: str


class MarineSpecieUpdate(BaseModel):
    """updateMarineSpecie body: partial merge of name/description."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None

    def changed_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class NameUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str


class DescriptionUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    description: str


class MarineSpecieResponse(BaseModel):
    """Marine species record with its taxonomy snapshot."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    taxonomy: TaxonomyResponse
    name: str
    description: str
    created_at: str
    updated_at: str
