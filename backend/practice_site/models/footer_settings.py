from practice_site.extensions import db
from .base import BaseModel
from .singleton_mixin import SingletonMixin


class FooterSettings(BaseModel, SingletonMixin):
    __tablename__ = "footer_settings"

    ENTITY_TYPE = "footer_settings"
    EDITABLE_FIELDS = ("general_info", "contact_buttons", "certification_items", "trust_seals", "bottom_info")
    JSON_LIST_FIELDS = ("contact_buttons", "certification_items", "trust_seals")
    JSON_OBJECT_FIELDS = ("general_info", "bottom_info")

    general_info = db.Column(db.JSON, nullable=False, default=dict)
    contact_buttons = db.Column(db.JSON, nullable=False, default=list)
    certification_items = db.Column(db.JSON, nullable=False, default=list)
    trust_seals = db.Column(db.JSON, nullable=False, default=list)
    bottom_info = db.Column(db.JSON, nullable=False, default=dict)
