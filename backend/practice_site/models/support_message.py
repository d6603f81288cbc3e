from practice_site.extensions import db
from .base import BaseModel

MESSAGE_TYPES = ("support", "contact", "feedback", "bug", "feature")


class SupportMessage(BaseModel):
    __tablename__ = "support_messages"

    name = db.Column(db.String(200), nullable=True)
    email = db.Column(db.String(200), nullable=True)
    subject = db.Column(db.String(300), nullable=True)
    message = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False, default="support")
    attachments = db.Column(db.JSON, nullable=False, default=list)

    is_read = db.Column(db.Boolean, nullable=False, default=False)
    admin_response = db.Column(db.Text, nullable=True)
    responded_at = db.Column(db.DateTime(timezone=True), nullable=True)
