import hmac
from functools import wraps
from flask import current_app, g, jsonify, request
from flask_jwt_extended import get_jwt, get_jwt_identity


def roles_required(*allowed_roles):
    """Use after @jwt_required(); exposes the caller id as g.current_admin_id."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            g.current_admin_id = get_jwt_identity()
            return fn(*args, **kwargs)
        return wrapper
    return decorator


def log_password_required(fn):
    """
    Gate for the plain-text log viewer. The password comes from the
    X-Log-Password header or the ?password= query parameter.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        expected = current_app.config.get("LOG_PASSWORD")
        if not expected:
            return jsonify({"error": "Log access is not configured"}), 503

        supplied = request.headers.get("X-Log-Password") or request.args.get("password") or ""

        if not hmac.compare_digest(supplied.encode(), expected.encode()):
            return jsonify({"error": "Invalid log password"}), 401

        return fn(*args, **kwargs)
    return wrapper
