import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv("JWT_ACCESS_TOKEN_HOURS", "12")))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Uploads
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(PROJECT_ROOT, "uploads"))
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    # Built SPA shell, first existing path wins
    SPA_INDEX_PATHS = [
        os.path.join(PROJECT_ROOT, "dist", "public", "index.html"),
        os.path.join(PROJECT_ROOT, "client", "index.html"),
    ]
    SEO_HTML_FILENAME = "index-seo.html"

    # Mailgun
    MAILGUN_API_KEY = os.getenv("MAILGUN_API_KEY")
    MAILGUN_DOMAIN = os.getenv("MAILGUN_DOMAIN")
    MAILGUN_API_BASE = os.getenv("MAILGUN_API_BASE", "https://api.mailgun.net/v3")
    MAIL_FROM = os.getenv("MAIL_FROM")
    RECIPIENT_EMAIL = os.getenv("RECIPIENT_EMAIL")
    CHAT_RECIPIENT_EMAIL = os.getenv("CHAT_RECIPIENT_EMAIL")
    MAIL_TIMEOUT = float(os.getenv("MAIL_TIMEOUT", "30"))

    # Admin log viewer
    LOG_PASSWORD = os.getenv("LOG_PASSWORD")

    # Seed values for `flask create-admin`
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///practice_site.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-jwt-secret-key-with-enough-length"
    LOG_PASSWORD = "log-secret"
    MAILGUN_API_KEY = None
    MAILGUN_DOMAIN = None
    RECIPIENT_EMAIL = None
    CHAT_RECIPIENT_EMAIL = None


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
