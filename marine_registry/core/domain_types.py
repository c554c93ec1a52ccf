"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - TaxonomyId and MarineSpecieId wrap opaque uuid4 strings
    - Writable field sets are the only keys a caller may supply
    - All valid sort directions encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaxonomyId = NewType("TaxonomyId", str)
MarineSpecieId = NewType("MarineSpecieId", str)


# ─── Field Sets ──────────────────────────────────────────────────

TAXONOMY_FIELDS: tuple[str, ...] = (
    "kingdom", "phylum", "taxon_class", "order",
    "family", "genus", "species",
)
TIMESTAMP_FIELDS: tuple[str, ...] = ("created_at", "updated_at")
MARINE_SPECIE_FIELDS: tuple[str, ...] = ("name", "description")


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Ordering for derived listings."""
    ASC = "asc"
    DESC = "desc"
