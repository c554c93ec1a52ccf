"""Record Timestamps - ISO-8601 UTC strings for created_at / updated_at.

Invariants:
    - Stamps are UTC with a trailing "Z" and microsecond precision
    - restamp() never returns a value earlier than created_at
"""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="microseconds")
    return stamp.replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse a stored stamp back to an aware datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def restamp(created_at: str) -> str:
    """Fresh updated_at for a record created at created_at."""
    now = utc_now_iso()
    if parse_timestamp(now) < parse_timestamp(created_at):
        # clock moved backwards since creation
        return created_at
    return now
