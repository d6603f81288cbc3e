from practice_site.extensions import db
from .base import BaseModel
from .singleton_mixin import SingletonMixin


class ContactSettings(BaseModel, SingletonMixin):
    __tablename__ = "contact_settings"

    ENTITY_TYPE = "contact_settings"
    EDITABLE_FIELDS = ("contact_items", "schedule_info", "location_info", "contact_card", "info_card")
    JSON_LIST_FIELDS = ("contact_items",)
    JSON_OBJECT_FIELDS = ("schedule_info", "location_info", "contact_card", "info_card")

    contact_items = db.Column(db.JSON, nullable=False, default=list)
    schedule_info = db.Column(db.JSON, nullable=False, default=dict)
    location_info = db.Column(db.JSON, nullable=False, default=dict)
    contact_card = db.Column(db.JSON, nullable=True)
    info_card = db.Column(db.JSON, nullable=True)
