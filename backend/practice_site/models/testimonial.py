from practice_site.extensions import db
from .base import BaseModel
from .ordered_mixin import OrderedMixin


class Testimonial(BaseModel, OrderedMixin):
    __tablename__ = "testimonials"

    ENTITY_TYPE = "testimonial"
    REQUIRED_FIELDS = ("name", "service", "testimonial")
    EDITABLE_FIELDS = ("name", "service", "testimonial", "rating", "photo", "is_active")

    name = db.Column(db.String(120), nullable=False)
    service = db.Column(db.String(120), nullable=False)
    testimonial = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, nullable=False, default=5)
    photo = db.Column(db.String(500), nullable=True)
