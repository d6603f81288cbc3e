from practice_site.extensions import db
from .base import BaseModel
from .ordered_mixin import OrderedMixin


class FaqItem(BaseModel, OrderedMixin):
    __tablename__ = "faq_items"

    ENTITY_TYPE = "faq_item"
    REQUIRED_FIELDS = ("question", "answer")
    EDITABLE_FIELDS = ("question", "answer", "is_active")

    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
