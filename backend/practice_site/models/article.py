from practice_site.extensions import db
from .base import BaseModel
from .ordered_mixin import OrderedMixin


class Article(BaseModel, OrderedMixin):
    __tablename__ = "articles"

    ENTITY_TYPE = "article"
    REQUIRED_FIELDS = ("title", "description", "content", "author")
    EDITABLE_FIELDS = (
        "title", "subtitle", "badge", "description", "content", "card_image",
        "author", "co_authors", "institution", "article_references", "doi",
        "keywords", "category", "reading_time", "show_contact_button",
        "contact_button_text", "contact_button_url", "is_featured", "is_active",
    )

    title = db.Column(db.String(300), nullable=False)
    subtitle = db.Column(db.String(300), nullable=True)
    badge = db.Column(db.String(100), nullable=True)
    description = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    card_image = db.Column(db.String(500), nullable=True)

    author = db.Column(db.String(200), nullable=False)
    co_authors = db.Column(db.Text, nullable=True)
    institution = db.Column(db.String(300), nullable=True)
    article_references = db.Column(db.Text, nullable=True)
    doi = db.Column(db.String(200), nullable=True)
    keywords = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(100), nullable=False, default="Psicologia")
    reading_time = db.Column(db.Integer, nullable=True)

    show_contact_button = db.Column(db.Boolean, nullable=False, default=True)
    contact_button_text = db.Column(db.String(200), nullable=True)
    contact_button_url = db.Column(db.String(500), nullable=True)

    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    is_featured = db.Column(db.Boolean, nullable=False, default=False, index=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)
