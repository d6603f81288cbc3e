from practice_site.extensions import db
from .base import BaseModel


class SiteConfig(BaseModel):
    """Key/value bag for site-wide settings (hero, SEO meta, pixels, maintenance)."""
    __tablename__ = "site_config"

    key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    value = db.Column(db.JSON, nullable=True)
