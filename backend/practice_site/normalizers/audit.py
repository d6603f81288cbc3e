from typing import Dict, Any
from practice_site.models.audit_log import AuditLog
from .common import iso


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    data = {
        "id": log.id,
        "category": log.category,
        "action": log.action,
        "status": log.status,
        "actor_id": log.actor_id,
        "ip": log.ip,
        "user_agent": log.user_agent,
        "payload": log.payload or {},
        "created_at": iso(log.created_at),
    }

    # Access entries (logins, log views) are not tied to an entity
    if log.category == "change":
        data["entity_type"] = log.entity_type
        data["entity_id"] = log.entity_id

    return data
