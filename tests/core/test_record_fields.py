"""Record Fields tests - payload checks and taxonomy snapshots."""

from types import SimpleNamespace

import pytest

from marine_registry.core.domain_types import MARINE_SPECIE_FIELDS, TAXONOMY_FIELDS
from marine_registry.core.errors import InvalidPayloadError
from marine_registry.core.record_fields import (
    check_new_fields,
    check_update_fields,
    taxonomy_snapshot,
)


def test_new_fields_accepts_complete_payload():
    clean = check_new_fields({"name": "Clownfish", "description": ""}, MARINE_SPECIE_FIELDS)
    assert clean == {"name": "Clownfish", "description": ""}


def test_new_fields_rejects_empty_mapping():
    with pytest.raises(InvalidPayloadError) as exc_info:
        check_new_fields({}, MARINE_SPECIE_FIELDS)
    assert exc_info.value.message == "invalid payload"


@pytest.mark.parametrize("payload", [None, "name", ["name"], 42])
def test_new_fields_rejects_non_mapping(payload):
    with pytest.raises(InvalidPayloadError):
        check_new_fields(payload, MARINE_SPECIE_FIELDS)


def test_new_fields_reports_unknown_keys():
    with pytest.raises(InvalidPayloadError) as exc_info:
        check_new_fields(
            {"name": "a", "description": "b", "id": "x", "created_at": "y"},
            MARINE_SPECIE_FIELDS,
        )
    assert exc_info.value.fields == ["created_at", "id"]


def test_new_fields_rejects_non_text_values():
    with pytest.raises(InvalidPayloadError) as exc_info:
        check_new_fields({"name": 1, "description": "b"}, MARINE_SPECIE_FIELDS)
    assert exc_info.value.fields == ["name"]


def test_update_fields_allows_subset_and_empty():
    assert check_update_fields({"genus": "Premnas"}, TAXONOMY_FIELDS) == {"genus": "Premnas"}
    assert check_update_fields({}, TAXONOMY_FIELDS) == {}


def test_update_fields_returns_a_copy():
    payload = {"genus": "Premnas"}
    clean = check_update_fields(payload, TAXONOMY_FIELDS)
    clean["genus"] = "changed"
    assert payload["genus"] == "Premnas"


def test_snapshot_copies_every_attribute():
    source = SimpleNamespace(
        id="t1", kingdom="Animalia", phylum="Chordata", taxon_class="Actinopterygii",
        order="Perciformes", family="Pomacentridae", genus="Amphiprion",
        species="ocellaris", created_at="c", updated_at="u",
    )
    snapshot = taxonomy_snapshot(source)
    assert snapshot == {
        "id": "t1", "kingdom": "Animalia", "phylum": "Chordata",
        "taxon_class": "Actinopterygii", "order": "Perciformes",
        "family": "Pomacentridae", "genus": "Amphiprion", "species": "ocellaris",
        "created_at": "c", "updated_at": "u",
    }


def test_snapshot_is_independent_of_source():
    source = SimpleNamespace(
        id="t1", kingdom="Animalia", phylum="", taxon_class="", order="",
        family="", genus="", species="", created_at="c", updated_at="u",
    )
    first = taxonomy_snapshot(source)
    source.kingdom = "Plantae"
    assert first["kingdom"] == "Animalia"
    assert taxonomy_snapshot(source) is not first
