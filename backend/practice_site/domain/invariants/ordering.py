from typing import Any
from .exceptions import InvariantViolation

# Envelopes the admin UI has sent over time; a bare array is also accepted.
REORDER_ENVELOPE_KEYS = ("items", "value")


def assert_order_value(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvariantViolation(f"order must be a non-negative integer, got {value!r}")
    return value


def parse_reorder_payload(payload: Any) -> list[dict[str, Any]]:
    """
    Extract [{id, order}, ...] from a reorder request body.

    Raises InvariantViolation for unknown envelopes, empty lists,
    entries without an id or with a bad order value.
    """
    entries = payload

    if isinstance(payload, dict):
        for key in REORDER_ENVELOPE_KEYS:
            if key in payload:
                entries = payload[key]
                break
        else:
            raise InvariantViolation("Reorder payload must be an array of {id, order} items")

    if not isinstance(entries, list):
        raise InvariantViolation("Reorder payload must be an array of {id, order} items")

    if not entries:
        raise InvariantViolation("Reorder payload is empty")

    parsed = []
    for entry in entries:
        if not isinstance(entry, dict) or entry.get("id") in (None, ""):
            raise InvariantViolation("Each reorder item needs an id")

        parsed.append({
            "id": str(entry["id"]),
            "order": assert_order_value(entry.get("order")),
        })

    return parsed
