from flask import request, jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.content.singletons import (
    get_singleton,
    reset_singleton,
    update_singleton,
)
from practice_site.models import (
    ContactSettings,
    CookieSettings,
    FooterSettings,
    PrivacyPolicy,
    TermsOfUse,
)
from practice_site.normalizers.settings import normalize_settings
from practice_site.utils.decorators import roles_required
from . import api_bp

# path, model, admin GET exposed
SINGLETONS = (
    ("contact-settings", ContactSettings, True),
    ("footer-settings", FooterSettings, True),
    ("cookie-settings", CookieSettings, False),
    ("privacy-policy", PrivacyPolicy, False),
    ("terms-of-use", TermsOfUse, False),
)


def register_singleton(path, model, admin_get):
    name = path.replace("-", "_")

    def public_get():
        return jsonify(normalize_settings(get_singleton(model)))

    def admin_update():
        return jsonify(normalize_settings(update_singleton(model, request.get_json(silent=True))))

    api_bp.add_url_rule(f"/{path}", f"get_{name}", public_get, methods=["GET"])
    api_bp.add_url_rule(
        f"/admin/{path}", f"admin_update_{name}",
        jwt_required()(roles_required("admin")(admin_update)),
        methods=["PUT"],
    )

    if admin_get:
        api_bp.add_url_rule(
            f"/admin/{path}", f"admin_get_{name}",
            jwt_required()(roles_required("admin")(public_get)),
            methods=["GET"],
        )


for _path, _model, _admin_get in SINGLETONS:
    register_singleton(_path, _model, _admin_get)


@api_bp.route("/admin/reset-footer-badges", methods=["POST"])
@jwt_required()
@roles_required("admin")
def reset_footer():
    footer = reset_singleton(FooterSettings)
    return jsonify({"success": True, "footer": normalize_settings(footer)})
