import logging
import os

from flask import Flask, current_app, send_from_directory
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api import api_bp
from .site import site_bp
from .middleware.seo_middleware import seo_middleware
from .errors import register_error_handlers
from .cli import register_cli
from flask_swagger_ui import get_swaggerui_blueprint

SWAGGER_URL = "/swagger"
OPENAPI_URL = "/openapi/site.yaml"


def configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.logger.setLevel(level)

    # Reduce verbosity of third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    from . import models  # noqa: F401  (register tables for migrations)

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    seo_middleware(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)
    register_cli(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi_site")
    def serve_openapi():
        return send_from_directory(
            os.path.join(current_app.root_path, "api"),
            "openapi.yaml",
            mimetype="application/yaml",
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        OPENAPI_URL,
        config={
            "app_name": "Practice Site API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    # Catch-all SPA routes last
    app.register_blueprint(site_bp)

    app.logger.info(f"Practice site app created ({config_name})")
    return app
