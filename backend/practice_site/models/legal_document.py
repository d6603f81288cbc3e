from practice_site.extensions import db
from .base import BaseModel, utc_now
from .singleton_mixin import SingletonMixin


class LegalDocumentMixin(SingletonMixin):
    EDITABLE_FIELDS = ("title", "content", "is_active")
    REQUIRED_FIELDS = ("title", "content")

    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    last_updated = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now)
    is_active = db.Column(db.Boolean, nullable=False, default=True)


class PrivacyPolicy(BaseModel, LegalDocumentMixin):
    __tablename__ = "privacy_policy"
    ENTITY_TYPE = "privacy_policy"


class TermsOfUse(BaseModel, LegalDocumentMixin):
    __tablename__ = "terms_of_use"
    ENTITY_TYPE = "terms_of_use"
