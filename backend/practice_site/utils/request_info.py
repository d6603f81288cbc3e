from flask import has_request_context, request
from practice_site.domain.invariants.exceptions import InvariantViolation


def client_ip():
    """
    Best-effort client address behind a proxy:
    first X-Forwarded-For hop, then X-Real-IP, then the socket address.
    """
    if not has_request_context():
        return None

    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return request.remote_addr


def client_user_agent():
    if not has_request_context():
        return None
    return request.headers.get("User-Agent")


def public_base_url():
    """Scheme and host as the visitor sees them (honours proxy headers)."""
    proto = request.headers.get("X-Forwarded-Proto", request.scheme).split(",")[0].strip()
    host = request.headers.get("X-Forwarded-Host", request.host).split(",")[0].strip()
    return f"{proto}://{host}"


def json_object():
    """Request body as a dict; empty bodies read as {}, other JSON is a 400."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object")
    return data
