from typing import Callable, Any, Dict, Iterable, List, Optional

from practice_site.utils.pagination import CursorMeta


def normalize_pagination(
    items: Iterable[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: CursorMeta,
    months: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """{"items", "pagination"} for a cursor page; months when the listing is per month."""
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in items],
        "pagination": dict(cursor),
    }
    if months is not None:
        response["months"] = months
    return response
