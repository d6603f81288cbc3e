from flask import g, has_request_context
from practice_site.extensions import db
from practice_site.models.audit_log import AuditLog
from practice_site.utils.request_info import client_ip, client_user_agent
from practice_site.utils.transaction import transactional
from typing import Optional


def _current_actor_id():
    if not has_request_context():
        return None
    return getattr(g, "current_admin_id", None)


def _build_log(category, action, entity_type, entity_id, payload, status):
    log = AuditLog()

    log.category = category
    log.actor_id = _current_actor_id()
    log.action = action
    log.entity_type = entity_type
    log.entity_id = str(entity_id) if entity_id is not None else None
    log.status = status
    log.ip = client_ip()
    user_agent = client_user_agent()
    log.user_agent = user_agent[:500] if user_agent else None
    log.payload = payload or {}

    return log


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """
    Record an admin change. Added to the current session so it commits
    (or rolls back) together with the change it describes.
    """
    db.session.add(
        _build_log("change", action, entity_type, entity_id, payload, "SUCCESS")
    )


def log_access(
    *,
    action: str,
    status: str = "SUCCESS",
    payload: dict | None = None
):
    """Record a login or log-viewer access. Commits immediately."""
    with transactional():
        db.session.add(
            _build_log("access", action, None, None, payload, status)
        )
