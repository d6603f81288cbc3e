from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import parse, ParserError
from flask import request, abort

LOCK_HEADER = "If-Unmodified-Since"


def as_utc(ts: datetime) -> datetime:
    """Naive timestamps are stored as UTC."""
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def _client_timestamp() -> Optional[datetime]:
    raw = request.headers.get(LOCK_HEADER)
    if not raw:
        return None

    try:
        return as_utc(parse(raw))
    except (ParserError, ValueError, OverflowError):
        abort(400, description=f"Invalid {LOCK_HEADER} header")


def enforce_optimistic_lock(row) -> None:
    """
    Admin editors send back the updated_at they loaded. A row saved by
    someone else after that moment answers 409 instead of being overwritten.
    """
    seen_at = _client_timestamp()
    if seen_at is None or row.updated_at is None:
        return

    # HTTP dates have second precision
    if as_utc(row.updated_at).replace(microsecond=0) > seen_at:
        abort(409, description="This content was changed by another session. Reload and try again.")
