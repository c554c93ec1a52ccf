"""Boundary Protocols - structural contracts for records passed into core logic.

Invariants:
    - Core NEVER imports from the shell (models, services, api)
    - Derived views accept anything shaped like a stored record

Design Decisions:
    - Protocol over ABC: ORM rows and plain test objects both satisfy it
"""

from typing import Protocol


class TaxonomyLike(Protocol):
    """Structural contract for Taxonomy records."""
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


class MarineSpecieLike(Protocol):
    """Structural contract for MarineSpecie records.

    taxonomy is the embedded snapshot dict, not a reference to a stored row.
    """
    id: str
    taxonomy: dict
    name: str
    description: str
    created_at: str
    updated_at: str
