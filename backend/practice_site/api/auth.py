from flask import request, jsonify
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
)
from practice_site.models.admin_user import AdminUser
from practice_site.utils.audit import log_access
from . import api_bp


def _admin_claims(admin):
    return {"role": "admin", "username": admin.username}


def _submitted_username():
    data = request.get_json(silent=True)
    return data.get("username") if isinstance(data, dict) else None


def _check_credentials():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return None, (jsonify({"error": "Invalid request body"}), 400)

    username = data.get("username")
    password = data.get("password")

    if not username or not password:
        return None, (jsonify({"error": "Username and password required"}), 400)

    admin = AdminUser.query.filter_by(username=username).first()

    if not admin or not admin.check_password(password):
        return None, (jsonify({"error": "Invalid credentials"}), 401)

    return admin, None


@api_bp.route("/admin/login", methods=["POST"])
def login():
    admin, error = _check_credentials()

    if error:
        log_access(
            action="admin.login",
            status="FAILED",
            payload={"username": _submitted_username()},
        )
        return error

    log_access(action="admin.login", status="SUCCESS", payload={"username": admin.username})

    claims = _admin_claims(admin)

    return jsonify({
        "success": True,
        "admin": {"id": admin.id, "username": admin.username},
        "access_token": create_access_token(identity=admin.id, additional_claims=claims),
        "refresh_token": create_refresh_token(identity=admin.id, additional_claims=claims),
    }), 200


@api_bp.route("/admin/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    claims = get_jwt()
    access_token = create_access_token(
        identity=get_jwt_identity(),
        additional_claims={"role": claims.get("role"), "username": claims.get("username")},
    )
    return jsonify({"access_token": access_token}), 200


@api_bp.route("/secret/login", methods=["POST"])
def secret_login():
    """Same credentials as the admin; only confirms access to the secret chat."""
    admin, error = _check_credentials()

    if error:
        log_access(action="secret.login", status="FAILED")
        return error

    log_access(action="secret.login", status="SUCCESS", payload={"username": admin.username})
    return jsonify({"success": True, "authenticated": True}), 200
