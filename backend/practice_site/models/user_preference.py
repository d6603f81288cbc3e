from practice_site.extensions import db
from .base import BaseModel


class UserPreference(BaseModel):
    __tablename__ = "user_preferences"

    key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=False)
