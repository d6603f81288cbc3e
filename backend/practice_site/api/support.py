from flask import current_app, request, jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.messages import (
    create_support_message,
    delete_support_message,
    list_support_messages,
    update_support_message,
)
from practice_site.normalizers.messages import normalize_support_message
from practice_site.services.email_service import check_email_connection, send_support_email
from practice_site.utils.decorators import roles_required
from practice_site.utils.request_info import json_object, public_base_url
from . import api_bp


@api_bp.route("/admin/support-messages", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_list_support_messages():
    return jsonify([normalize_support_message(message) for message in list_support_messages()])


@api_bp.route("/admin/support-messages", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_create_support_message():
    message = create_support_message(request.get_json(silent=True))

    # The stored message is the source of truth; delivery failure is reported, not raised.
    result = send_support_email({
        **normalize_support_message(message),
        "server_url": public_base_url(),
    })
    if not result["success"]:
        current_app.logger.warning(f"Support message {message.id} saved but not emailed: {result['error']}")

    return jsonify({
        **normalize_support_message(message),
        "email_sent": result["success"],
        "email_error": result["error"],
    }), 201


@api_bp.route("/admin/support-messages/<message_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def admin_update_support_message(message_id):
    data = json_object()
    return jsonify(normalize_support_message(update_support_message(message_id, data)))


@api_bp.route("/admin/support-messages/<message_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def admin_delete_support_message(message_id):
    delete_support_message(message_id)
    return jsonify({"success": True})


# ------------------------
# Email diagnostics
# ------------------------

@api_bp.route("/admin/test-email-connection", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_test_email_connection():
    result = check_email_connection()
    return jsonify(result), 200 if result["success"] else 500


@api_bp.route("/admin/send-test-email", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_send_test_email():
    data = json_object()
    result = send_support_email({
        "name": data.get("name") or "Administrador",
        "email": data.get("email"),
        "subject": data.get("subject") or "Email de teste",
        "message": data.get("message") or "Email de teste enviado pelo painel administrativo.",
        "type": "support",
    })
    return jsonify(result), 200 if result["success"] else 500
