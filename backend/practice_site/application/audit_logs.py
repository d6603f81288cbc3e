from typing import Optional
from practice_site.extensions import db
from practice_site.models.audit_log import AuditLog, LOG_CATEGORIES
from practice_site.utils.pagination import apply_cursor, month_bounds, paginate_cursor
from werkzeug.exceptions import BadRequest


def _filtered_query(category: Optional[str], month: Optional[str]):
    query = AuditLog.query

    if category is not None:
        if category not in LOG_CATEGORIES:
            raise BadRequest(f"Unknown log category: {category}")
        query = query.filter(AuditLog.category == category)

    if month:
        start, end = month_bounds(month)
        query = query.filter(AuditLog.created_at >= start, AuditLog.created_at < end)

    return query


def list_logs(*, category: str, month: Optional[str], cursor: Optional[str], limit: int):
    query = apply_cursor(_filtered_query(category, month), model=AuditLog, cursor=cursor)
    return paginate_cursor(query, model=AuditLog, limit=limit)


def logs_for_month(month: str, category: Optional[str] = None):
    """All entries of one month, oldest first (report order)."""
    return (
        _filtered_query(category, month)
        .order_by(AuditLog.created_at.asc(), AuditLog.id.asc())
        .all()
    )


def available_months() -> list[str]:
    """YYYY-MM values that have at least one entry, newest first."""
    timestamps = db.session.query(AuditLog.created_at).all()
    months = {ts.strftime("%Y-%m") for (ts,) in timestamps if ts is not None}
    return sorted(months, reverse=True)
