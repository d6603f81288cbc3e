from practice_site.extensions import db
from .base import BaseModel
from sqlalchemy import event

LOG_CATEGORIES = ("change", "access")


class AuditLog(BaseModel):
    __tablename__ = "audit_logs"

    __table_args__ = (
        db.Index("ix_audit_cursor", "category", "created_at", "id"),
        db.Index("ix_audit_actor_action", "actor_id", "action"),
    )

    category = db.Column(db.String(20), nullable=False, default="change", index=True)
    actor_id = db.Column(db.String(36), nullable=True, index=True)
    action = db.Column(db.String(100), nullable=False, index=True)

    entity_type = db.Column(db.String(50), nullable=True, index=True)
    entity_id = db.Column(db.String(100), nullable=True, index=True)

    status = db.Column(db.String(20), nullable=False, default="SUCCESS")
    ip = db.Column(db.String(64), nullable=True)
    user_agent = db.Column(db.String(500), nullable=True)

    payload = db.Column(db.JSON, nullable=False, default=dict)


@event.listens_for(AuditLog, 'before_update')
@event.listens_for(AuditLog, 'before_delete')
def prevent_audit_mutation(mapper, connection, target):
    raise RuntimeError("Audit logs are immutable")
