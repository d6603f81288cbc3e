from practice_site.extensions import db
from .base import BaseModel
from .ordered_mixin import OrderedMixin

CODE_LOCATIONS = ("header", "body")


class CustomCode(BaseModel, OrderedMixin):
    """Raw HTML/JS snippets injected into the page header or body."""
    __tablename__ = "custom_codes"

    ENTITY_TYPE = "custom_code"
    REQUIRED_FIELDS = ("name", "code", "location")
    EDITABLE_FIELDS = ("name", "code", "location", "is_active")

    name = db.Column(db.String(200), nullable=False)
    code = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(20), nullable=False, index=True)
