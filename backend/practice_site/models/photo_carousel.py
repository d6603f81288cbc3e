from practice_site.extensions import db
from .base import BaseModel
from .ordered_mixin import OrderedMixin


class PhotoCarouselItem(BaseModel, OrderedMixin):
    __tablename__ = "photo_carousel"

    ENTITY_TYPE = "photo_carousel"
    REQUIRED_FIELDS = ("title", "image_url")
    EDITABLE_FIELDS = ("title", "description", "image_url", "show_text", "is_active")

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(500), nullable=False)
    show_text = db.Column(db.Boolean, nullable=False, default=True)
