"""Non-API routes: robots.txt, uploaded files, and the SPA shell."""
from flask import Blueprint, Response, current_app, jsonify, send_from_directory
from sqlalchemy.exc import SQLAlchemyError
from practice_site.application.site_config import get_config_value
from practice_site.services.seo_renderer import get_base_html
from practice_site.utils.request_info import public_base_url

site_bp = Blueprint("site", __name__)

UPLOAD_CACHE_SECONDS = 7 * 24 * 3600


def build_robots_txt(indexing_enabled, base_url):
    if indexing_enabled:
        return f"User-agent: *\nAllow: /\n\nSitemap: {base_url}/sitemap.xml\n"
    return "User-agent: *\nDisallow: /\n"


@site_bp.route("/robots.txt", methods=["GET"])
def robots_txt():
    try:
        marketing = get_config_value("marketing_pixels", {}) or {}
        indexing = marketing.get("enableGoogleIndexing", True) if isinstance(marketing, dict) else True
        body = build_robots_txt(indexing is not False, public_base_url())
    except SQLAlchemyError as exc:
        current_app.logger.error(f"robots.txt fell back to allow-all: {exc}")
        body = "User-agent: *\nAllow: /\n"

    return Response(body, mimetype="text/plain")


@site_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(
        current_app.config["UPLOAD_FOLDER"],
        filename,
        max_age=UPLOAD_CACHE_SECONDS,
    )


@site_bp.route("/", defaults={"path": ""}, methods=["GET"])
@site_bp.route("/<path:path>", methods=["GET"])
def spa_shell(path):
    if path == "api" or path.startswith("api/"):
        return jsonify({"error": "Not found"}), 404

    try:
        html = get_base_html()
    except FileNotFoundError:
        return jsonify({"error": "Site shell has not been built"}), 404

    return Response(html, mimetype="text/html")
