from datetime import datetime, timezone
import uuid
from practice_site.extensions import db


def utc_now():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utc_now, onupdate=utc_now, index=True)

    def __init__(self, **kwargs):
        # Explicit keyword constructor for editors and type checkers
        super().__init__(**kwargs)

    def __repr__(self):
        return f"<{type(self).__name__} {self.id}>"
