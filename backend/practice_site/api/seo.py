from flask import current_app, request, jsonify
from practice_site.services.bot_detector import SOCIAL_MEDIA_BOTS, detected_bot_name, is_social_media_bot
from practice_site.services.html_generator import is_html_statically_generated, regenerate_static_html
from practice_site.services.seo_renderer import (
    generate_meta_tags,
    get_seo_data,
    render_seo_html,
)
from practice_site.utils.request_info import json_object, public_base_url
from . import api_bp


@api_bp.route("/seo/preview", methods=["GET"])
def seo_preview():
    """Meta tags a crawler would receive for the given (or home) URL."""
    url = request.args.get("url") or f"{public_base_url()}/"
    data = get_seo_data(url)
    return jsonify({"seo": data, "meta_tags": generate_meta_tags(data)})


@api_bp.route("/seo/config", methods=["GET"])
def seo_config():
    return jsonify({
        "bots": list(SOCIAL_MEDIA_BOTS),
        "static_html_generated": is_html_statically_generated(),
        "seo": get_seo_data(f"{public_base_url()}/"),
    })


@api_bp.route("/seo/test", methods=["GET"])
def seo_test():
    """Simulate a crawler: ?userAgent=...&url=...&format=json"""
    user_agent = request.args.get("userAgent") or request.headers.get("User-Agent", "")
    url = request.args.get("url") or f"{public_base_url()}/"
    is_bot = is_social_media_bot(user_agent)

    if request.args.get("format") == "json" or not is_bot:
        return jsonify({
            "user_agent": user_agent,
            "is_bot": is_bot,
            "bot": detected_bot_name(user_agent),
            "url": url,
            "seo": get_seo_data(url) if is_bot else None,
        })

    try:
        html = render_seo_html(url)
    except OSError as exc:
        return jsonify({"error": str(exc)}), 404

    return current_app.response_class(html, mimetype="text/html")


@api_bp.route("/seo/regenerate-html", methods=["POST"])
def seo_regenerate_html():
    try:
        path = regenerate_static_html(public_base_url())
    except (OSError, ValueError) as exc:
        current_app.logger.error(f"Static SEO HTML generation failed: {exc}")
        return jsonify({"success": False, "error": str(exc)}), 500

    return jsonify({"success": True, "path": path})


@api_bp.route("/seo/refresh-cache", methods=["POST"])
def seo_refresh_cache():
    """Crawlers cache previews on their side; point the admin at their debuggers."""
    url = json_object().get("url") or f"{public_base_url()}/"
    return jsonify({
        "success": True,
        "url": url,
        "tools": {
            "facebook": f"https://developers.facebook.com/tools/debug/?q={url}",
            "linkedin": f"https://www.linkedin.com/post-inspector/inspect/{url}",
            "twitter": "https://cards-dev.twitter.com/validator",
        },
    })
