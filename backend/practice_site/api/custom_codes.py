from flask import jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.content.ordered import list_items
from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.models.custom_code import CODE_LOCATIONS, CustomCode
from practice_site.normalizers.content import normalize_custom_code
from practice_site.utils.decorators import roles_required
from .collections import register_collection
from . import api_bp

register_collection("custom-codes", CustomCode, normalize_custom_code, public=False)


def _codes_at(location, *, active_only):
    if location not in CODE_LOCATIONS:
        raise InvariantViolation(f"location must be one of {', '.join(CODE_LOCATIONS)}")

    query = CustomCode.query.filter_by(location=location)
    return list_items(CustomCode, active_only=active_only, query=query)


@api_bp.route("/custom-codes/<location>", methods=["GET"])
def public_custom_codes(location):
    return jsonify([normalize_custom_code(code) for code in _codes_at(location, active_only=True)])


@api_bp.route("/admin/custom-codes/<location>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_custom_codes_at(location):
    return jsonify([normalize_custom_code(code, admin=True) for code in _codes_at(location, active_only=False)])
