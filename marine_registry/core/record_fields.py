"""Record Fields - payload checks and taxonomy snapshots, pure and IO-free.

Invariants:
    - Create payloads must be a non-empty mapping holding every writable field
    - Update payloads may hold any subset of writable fields (including none)
    - Unknown keys (id, timestamps, typos) and non-string values are rejected
    - taxonomy_snapshot() returns a new dict on every call; callers own it

Design Decisions:
    - Checks raise InvalidPayloadError so stores and routes share one error shape
"""

from collections.abc import Mapping

from marine_registry.core.domain_types import TAXONOMY_FIELDS, TIMESTAMP_FIELDS
from marine_registry.core.errors import InvalidPayloadError
from marine_registry.core.repository_protocols import TaxonomyLike


def _check_shape(fields: object, allowed: tuple[str, ...]) -> dict:
    if not isinstance(fields, Mapping):
        raise InvalidPayloadError("invalid payload: expected an object")
    unknown = sorted(str(k) for k in fields if k not in allowed)
    if unknown:
        raise InvalidPayloadError(
            f"invalid payload: unknown fields {', '.join(unknown)}", unknown,
        )
    not_text = sorted(k for k, v in fields.items() if not isinstance(v, str))
    if not_text:
        raise InvalidPayloadError(
            f"invalid payload: fields must be text: {', '.join(not_text)}",
            not_text,
        )
    return dict(fields)


def check_new_fields(fields: object, allowed: tuple[str, ...]) -> dict:
    """Validate a create payload. Returns a clean copy."""
    if isinstance(fields, Mapping) and not fields:
        raise InvalidPayloadError("invalid payload")
    clean = _check_shape(fields, allowed)
    missing = [name for name in allowed if name not in clean]
    if missing:
        raise InvalidPayloadError(
            f"invalid payload: missing fields {', '.join(missing)}", missing,
        )
    return clean


def check_update_fields(fields: object, allowed: tuple[str, ...]) -> dict:
    """Validate a partial update payload. Returns a clean copy."""
    return _check_shape(fields, allowed)


def taxonomy_snapshot(taxonomy: TaxonomyLike) -> dict:
    """Copy every Taxonomy attribute into a fresh, independent dict."""
    snapshot = {"id": taxonomy.id}
    for name in TAXONOMY_FIELDS + TIMESTAMP_FIELDS:
        snapshot[name] = getattr(taxonomy, name)
    return snapshot
