from practice_site.extensions import db
from .base import BaseModel
from .ordered_mixin import OrderedMixin


class Service(BaseModel, OrderedMixin):
    __tablename__ = "services"

    ENTITY_TYPE = "service"
    REQUIRED_FIELDS = ("title", "description", "icon", "gradient")
    EDITABLE_FIELDS = (
        "title", "description", "icon", "gradient",
        "price", "duration", "show_price", "show_duration", "is_active",
    )

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(100), nullable=False)
    gradient = db.Column(db.String(200), nullable=False)
    price = db.Column(db.String(100), nullable=True)
    duration = db.Column(db.String(100), nullable=True)
    show_price = db.Column(db.Boolean, nullable=False, default=True)
    show_duration = db.Column(db.Boolean, nullable=False, default=True)
