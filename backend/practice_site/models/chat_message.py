from practice_site.extensions import db
from .base import BaseModel


class ChatMessage(BaseModel):
    """Anonymous message sent through the password-gated secret chat."""
    __tablename__ = "chat_messages"

    message = db.Column(db.Text, nullable=False)
    attachments = db.Column(db.JSON, nullable=False, default=list)
    # [{"url", "filename", "base64": "data:<mime>;base64,..."}]
    attachment_backups = db.Column(db.JSON, nullable=False, default=list)
    sender_ip = db.Column(db.String(64), nullable=True)
    user_agent = db.Column(db.String(500), nullable=True)
    is_read = db.Column(db.Boolean, nullable=False, default=False)
