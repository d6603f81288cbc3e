# practice_site/utils/pagination.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Tuple, TypedDict, Type, Any

from sqlalchemy.orm import Query
from sqlalchemy.sql import or_, and_
from werkzeug.exceptions import BadRequest

DEFAULT_LIMIT = 50
MAX_LIMIT = 200


class CursorMeta(TypedDict):
    """Cursor pagination metadata returned by every paginated log listing."""
    has_more: bool
    next_cursor: Optional[str]


def parse_limit(raw: Optional[str]) -> int:
    if raw in (None, ""):
        return DEFAULT_LIMIT
    try:
        limit = int(raw)
    except ValueError as exc:
        raise BadRequest("Limit must be an integer") from exc

    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")
    return min(limit, MAX_LIMIT)


def month_bounds(month: str) -> Tuple[datetime, datetime]:
    """
    "YYYY-MM" -> [first instant of the month, first instant of the next) in UTC.
    """
    try:
        start = datetime.strptime(month, "%Y-%m").replace(tzinfo=timezone.utc)
    except (TypeError, ValueError) as exc:
        raise BadRequest("Month must use the YYYY-MM format") from exc

    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def encode_cursor(created_at: datetime, row_id: Any) -> str:
    """
    Format: ISO8601|<id>
    """
    if not isinstance(created_at, datetime) or row_id is None:
        raise ValueError("created_at and row_id are required to encode cursor")

    return f"{created_at.isoformat()}|{row_id}"


def decode_cursor(cursor: str) -> Tuple[datetime, str]:
    if not cursor or "|" not in cursor:
        raise BadRequest("Invalid cursor format")

    ts_str, row_id = cursor.split("|", 1)
    try:
        return datetime.fromisoformat(ts_str), row_id
    except ValueError as exc:
        raise BadRequest("Invalid cursor format") from exc


def apply_cursor(
    query: Query,
    *,
    model: Type[Any],
    cursor: Optional[str],
) -> Query:
    """
    Restrict a query to rows strictly older than the cursor.

    Ordering contract: ORDER BY created_at DESC, id DESC
    """
    if not cursor:
        return query

    cursor_ts, cursor_id = decode_cursor(cursor)

    return query.filter(
        or_(
            model.created_at < cursor_ts,
            and_(
                model.created_at == cursor_ts,
                model.id < cursor_id,
            ),
        )
    )


def paginate_cursor(
    query: Query,
    *,
    model: Type[Any],
    limit: int,
) -> tuple[list[Any], CursorMeta]:
    """
    Fetch limit + 1 rows to detect continuation, trim the extra row and
    build the next cursor from the last returned row.
    """
    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")

    rows = (
        query.order_by(model.created_at.desc(), model.id.desc())
        .limit(limit + 1)
        .all()
    )

    has_more = len(rows) > limit
    items = rows[:limit]

    next_cursor: Optional[str] = None
    if items and has_more:
        last = items[-1]
        next_cursor = encode_cursor(last.created_at, last.id)

    return items, {
        "has_more": has_more,
        "next_cursor": next_cursor,
    }
