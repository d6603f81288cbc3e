from practice_site.extensions import db
from .base import BaseModel
from .ordered_mixin import OrderedMixin


class Specialty(BaseModel, OrderedMixin):
    __tablename__ = "specialties"

    ENTITY_TYPE = "specialty"
    REQUIRED_FIELDS = ("title", "description")
    EDITABLE_FIELDS = ("title", "description", "icon", "icon_color", "is_active")

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(100), nullable=False, default="Brain")
    icon_color = db.Column(db.String(20), nullable=False, default="#ec4899")
