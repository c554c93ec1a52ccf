"""Derived Views tests - sorts and searches over plain record objects.

Tests cover:
    - Kingdom sort is case-sensitive and stable in both directions
    - Asc and desc are exact reverses when kingdoms are distinct
    - Creation-time sort parses stamps (mixed offsets) and is stable
    - Kingdom/phylum search is exact and case-insensitive
    - Name, genus and class searches are case-insensitive substring matches
    - Inputs are never reordered in place

Design Decisions:
    - Pure core functions: no mocks, no fixtures, records built inline
"""

from types import SimpleNamespace

from marine_registry.core.derived_views import (
    search_by_class,
    search_by_genus,
    search_by_kingdom_or_phylum,
    search_by_name,
    sort_by_creation_time,
    sort_by_kingdom,
)
from marine_registry.core.domain_types import SortDirection


def _specie(
    id: str,
    kingdom: str = "Animalia",
    phylum: str = "Chordata",
    genus: str = "Amphiprion",
    name: str = "Clownfish",
    created_at: str = "2024-01-01T00:00:00.000000Z",
):
    return SimpleNamespace(
        id=id,
        name=name,
        description="",
        taxonomy={"kingdom": kingdom, "phylum": phylum, "genus": genus},
        created_at=created_at,
        updated_at=created_at,
    )


def test_sort_by_kingdom_ascending():
    species = [_specie("a", "Plantae"), _specie("b", "Animalia"), _specie("c", "Chromista")]
    assert [s.id for s in sort_by_kingdom(species)] == ["b", "c", "a"]


def test_sort_by_kingdom_desc_is_reverse_of_asc():
    species = [_specie("a", "Plantae"), _specie("b", "Animalia"), _specie("c", "Chromista")]
    asc = sort_by_kingdom(species, SortDirection.ASC)
    desc = sort_by_kingdom(species, SortDirection.DESC)
    assert desc == list(reversed(asc))


def test_sort_by_kingdom_is_case_sensitive():
    species = [_specie("lower", "animalia"), _specie("upper", "Plantae")]
    # uppercase letters order before lowercase ones
    assert [s.id for s in sort_by_kingdom(species)] == ["upper", "lower"]


def test_sort_by_kingdom_ties_keep_input_order_both_ways():
    species = [_specie("x", "Animalia"), _specie("y", "Animalia"), _specie("z", "Fungi")]
    assert [s.id for s in sort_by_kingdom(species)] == ["x", "y", "z"]
    assert [s.id for s in sort_by_kingdom(species, SortDirection.DESC)] == ["z", "x", "y"]


def test_sort_by_kingdom_does_not_mutate_input():
    species = [_specie("a", "Plantae"), _specie("b", "Animalia")]
    sort_by_kingdom(species)
    assert [s.id for s in species] == ["a", "b"]


def test_sort_by_creation_time_parses_timestamps():
    species = [
        _specie("late", created_at="2024-03-01T10:00:00.000000Z"),
        _specie("early", created_at="2024-03-01T11:00:00+02:00"),
        _specie("middle", created_at="2024-03-01T09:30:00.000000Z"),
    ]
    assert [s.id for s in sort_by_creation_time(species)] == ["early", "middle", "late"]


def test_sort_by_creation_time_is_stable():
    stamp = "2024-01-01T00:00:00.000000Z"
    species = [_specie("b", created_at=stamp), _specie("a", created_at=stamp)]
    assert [s.id for s in sort_by_creation_time(species)] == ["b", "a"]


def test_search_by_kingdom_or_phylum_matches_either_field():
    species = [
        _specie("fish", "Animalia", "Chordata"),
        _specie("kelp", "Chromista", "Ochrophyta"),
    ]
    assert [s.id for s in search_by_kingdom_or_phylum(species, "ANIMALIA")] == ["fish"]
    assert [s.id for s in search_by_kingdom_or_phylum(species, "ochrophyta")] == ["kelp"]


def test_search_by_kingdom_or_phylum_is_exact():
    species = [_specie("fish", "Animalia", "Chordata")]
    assert search_by_kingdom_or_phylum(species, "Anim") == []


def test_search_by_name_substring():
    species = [_specie("a", name="Clownfish"), _specie("b", name="Blue tang")]
    assert [s.id for s in search_by_name(species, "FISH")] == ["a"]
    assert [s.id for s in search_by_name(species, "")] == ["a", "b"]


def test_search_by_genus_substring():
    species = [_specie("a", genus="Amphiprion"), _specie("b", genus="Paracanthurus")]
    assert [s.id for s in search_by_genus(species, "canth")] == ["b"]


def test_search_by_class_substring():
    taxonomies = [
        SimpleNamespace(id="t1", taxon_class="Actinopterygii"),
        SimpleNamespace(id="t2", taxon_class="Phaeophyceae"),
    ]
    assert [t.id for t in search_by_class(taxonomies, "PHYCEAE")] == ["t2"]


def test_repeated_searches_are_identical():
    species = [_specie("a"), _specie("b", "Fungi")]
    assert search_by_kingdom_or_phylum(species, "animalia") == search_by_kingdom_or_phylum(species, "animalia")
