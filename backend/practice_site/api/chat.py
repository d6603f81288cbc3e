import os

from flask import abort, current_app, request, jsonify, send_from_directory
from flask_jwt_extended import jwt_required
from practice_site.application.messages import (
    create_chat_message,
    find_attachment_backup,
    list_chat_messages,
    mark_chat_message_read,
)
from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.normalizers.messages import normalize_chat_message
from practice_site.services.email_service import SECRET_MESSAGE_TYPE, send_support_email
from practice_site.utils.decorators import roles_required
from practice_site.utils.media import save_image, upload_root
from practice_site.utils.request_info import client_ip, client_user_agent, public_base_url
from . import api_bp


@api_bp.route("/secret/send", methods=["POST"])
def secret_send():
    """
    Anonymous message with optional image attachments.

    The message is stored (with base64 copies of the attachments) before
    any email is attempted.
    """
    message = (request.form.get("message") or "").strip()
    if not message:
        return jsonify({"error": "Message is required"}), 400

    attachments = []
    for upload in request.files.getlist("attachments"):
        try:
            attachments.append(save_image(upload, "secret"))
        except InvariantViolation as exc:
            current_app.logger.warning(f"Skipping secret chat attachment {upload.filename}: {exc}")

    chat = create_chat_message(
        message=message,
        attachments=attachments,
        sender_ip=client_ip(),
        user_agent=client_user_agent(),
    )

    recipient = current_app.config.get("CHAT_RECIPIENT_EMAIL")
    if not recipient:
        current_app.logger.error("CHAT_RECIPIENT_EMAIL is not configured")
        return jsonify({"error": "Email configuration not found", "id": chat.id}), 500

    result = send_support_email({
        "name": "Chat Secreto",
        "email": None,
        "subject": "",
        "message": message,
        "type": SECRET_MESSAGE_TYPE,
        "attachments": attachments,
        "recipient_override": recipient,
        "server_url": public_base_url(),
    })

    return jsonify({
        "success": True,
        "id": chat.id,
        "attachments": attachments,
        "email_sent": result["success"],
    }), 200


@api_bp.route("/admin/chat-messages", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_list_chat_messages():
    unread_only = request.args.get("unread", "").lower() in ("1", "true", "yes")
    include_backups = request.args.get("backups", "").lower() in ("1", "true", "yes")
    return jsonify([
        normalize_chat_message(chat, include_backups=include_backups)
        for chat in list_chat_messages(unread_only=unread_only)
    ])


@api_bp.route("/admin/chat-messages/<message_id>/read", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_mark_chat_message_read(message_id):
    return jsonify(normalize_chat_message(mark_chat_message_read(message_id)))


SECRET_IMAGE_CACHE_SECONDS = 24 * 3600


@api_bp.route("/secret/image/<filename>", methods=["GET"])
def secret_image(filename):
    """
    Chat attachment by filename. Served from disk when present, otherwise
    rebuilt from the base64 backup stored with the message.
    """
    directory = os.path.join(upload_root(), "secret")
    if os.path.isfile(os.path.join(directory, os.path.basename(filename))):
        return send_from_directory(directory, filename, max_age=SECRET_IMAGE_CACHE_SECONDS)

    backup = find_attachment_backup(filename)
    if backup is None:
        abort(404, description="Image not found")

    mimetype, content = backup
    current_app.logger.info(f"Served secret attachment {filename} from its base64 backup")

    response = current_app.response_class(content, mimetype=mimetype)
    response.headers["Cache-Control"] = f"public, max-age={SECRET_IMAGE_CACHE_SECONDS}"
    return response
