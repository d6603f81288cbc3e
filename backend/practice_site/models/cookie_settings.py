from practice_site.extensions import db
from .base import BaseModel
from .singleton_mixin import SingletonMixin


class CookieSettings(BaseModel, SingletonMixin):
    __tablename__ = "cookie_settings"

    ENTITY_TYPE = "cookie_settings"
    EDITABLE_FIELDS = (
        "is_enabled", "title", "message", "accept_button_text", "decline_button_text",
        "privacy_link_text", "terms_link_text", "position",
    )

    is_enabled = db.Column(db.Boolean, nullable=False, default=True)
    title = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    accept_button_text = db.Column(db.String(100), nullable=False)
    decline_button_text = db.Column(db.String(100), nullable=False)
    privacy_link_text = db.Column(db.String(100), nullable=False)
    terms_link_text = db.Column(db.String(100), nullable=False)
    position = db.Column(db.String(20), nullable=False, default="bottom")
