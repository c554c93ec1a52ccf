"""Derived Views - sorted and filtered listings over a full store enumeration.

Invariants:
    - Pure functions: no IO, no async, no DB, input sequences never mutated
    - Sorts are stable; ties keep the enumeration (key) order in both directions
    - Kingdom sort is case-sensitive lexicographic
    - Searches are case-insensitive; kingdom/phylum is exact, the rest substring

Design Decisions:
    - Recomputed from scratch on every call, no incremental index. Fine at
      registry scale; each call is O(n log n) over the whole collection.
"""

from collections.abc import Sequence

from marine_registry.core.domain_types import SortDirection
from marine_registry.core.repository_protocols import MarineSpecieLike, TaxonomyLike
from marine_registry.core.timestamps import parse_timestamp


def _kingdom(specie: MarineSpecieLike) -> str:
    return (specie.taxonomy or {}).get("kingdom", "")


def sort_by_kingdom(
    species: Sequence[MarineSpecieLike],
    direction: SortDirection = SortDirection.ASC,
) -> list[MarineSpecieLike]:
    """Order species by their embedded taxonomy kingdom."""
    return sorted(
        species, key=_kingdom, reverse=direction is SortDirection.DESC,
    )


def sort_by_creation_time(
    species: Sequence[MarineSpecieLike],
) -> list[MarineSpecieLike]:
    """Order species by created_at, oldest first."""
    return sorted(species, key=lambda s: parse_timestamp(s.created_at))


def search_by_kingdom_or_phylum(
    species: Sequence[MarineSpecieLike], text: str,
) -> list[MarineSpecieLike]:
    """Species whose taxonomy kingdom or phylum equals text, ignoring case."""
    needle = text.lower()
    return [
        s for s in species
        if _kingdom(s).lower() == needle
        or (s.taxonomy or {}).get("phylum", "").lower() == needle
    ]


def search_by_name(
    species: Sequence[MarineSpecieLike], text: str,
) -> list[MarineSpecieLike]:
    needle = text.lower()
    return [s for s in species if needle in s.name.lower()]


def search_by_genus(
    species: Sequence[MarineSpecieLike], text: str,
) -> list[MarineSpecieLike]:
    needle = text.lower()
    return [
        s for s in species
        if needle in (s.taxonomy or {}).get("genus", "").lower()
    ]


def search_by_class(
    taxonomies: Sequence[TaxonomyLike], text: str,
) -> list[TaxonomyLike]:
    """Taxonomies whose taxon_class contains text, ignoring case."""
    needle = text.lower()
    return [t for t in taxonomies if needle in t.taxon_class.lower()]
