import base64
import binascii
import logging
import mimetypes
import os
import re
from typing import Any, Dict, Optional, Tuple
from flask import abort
from practice_site.extensions import db
from practice_site.models.base import utc_now
from practice_site.models.chat_message import ChatMessage
from practice_site.models.support_message import SupportMessage
from practice_site.domain.invariants.content import assert_support_message
from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.utils.audit import log_action
from practice_site.utils.media import url_to_path
from practice_site.utils.transaction import transactional

logger = logging.getLogger(__name__)

SUPPORT_FIELDS = ("name", "email", "subject", "message", "type", "attachments")
SUPPORT_UPDATE_FIELDS = ("is_read", "admin_response")


# ------------------------
# Support messages
# ------------------------

def list_support_messages():
    return SupportMessage.query.order_by(SupportMessage.created_at.desc()).all()


def create_support_message(data: Dict[str, Any]) -> SupportMessage:
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object")

    message = SupportMessage()
    for field in SUPPORT_FIELDS:
        if field in data:
            setattr(message, field, data[field])

    message.type = message.type or "support"
    message.attachments = message.attachments or []
    if not isinstance(message.attachments, list):
        raise InvariantViolation("attachments must be a list")

    with transactional():
        assert_support_message(message)
        db.session.add(message)
        db.session.flush()

        log_action(
            action="support_message.create",
            entity_type="support_message",
            entity_id=message.id,
            payload={"type": message.type, "attachments": len(message.attachments)},
        )

    return message


def update_support_message(message_id, data: Dict[str, Any]) -> SupportMessage:
    """Setting a non-empty admin_response stamps responded_at."""
    message = db.session.get(SupportMessage, message_id)
    if message is None:
        abort(404, description="Support message not found")

    changed_fields: list[str] = []

    with transactional():
        for field in SUPPORT_UPDATE_FIELDS:
            if field in data and getattr(message, field) != data[field]:
                setattr(message, field, data[field])
                changed_fields.append(field)

        if "admin_response" in changed_fields and message.admin_response:
            message.responded_at = utc_now()

        assert_support_message(message)

        if changed_fields:
            log_action(
                action="support_message.update",
                entity_type="support_message",
                entity_id=message.id,
                payload={"fields": changed_fields},
            )

    return message


def delete_support_message(message_id):
    message = db.session.get(SupportMessage, message_id)
    if message is None:
        abort(404, description="Support message not found")

    with transactional():
        db.session.delete(message)

        log_action(
            action="support_message.delete",
            entity_type="support_message",
            entity_id=message_id,
        )


# ------------------------
# Secret chat
# ------------------------

# Secret attachments are always the optimizer's WebP output
BACKUP_FALLBACK_MIMETYPE = "image/webp"

_DATA_URI_RE = re.compile(r"^data:([^;,]+);base64,(.+)$", re.DOTALL)


def encode_backup(file_url):
    """Base64 data URI copy of an uploaded attachment, kept with the message."""
    path = url_to_path(file_url)
    if not path or not os.path.exists(path):
        return None

    mimetype = mimetypes.guess_type(path)[0] or BACKUP_FALLBACK_MIMETYPE
    with open(path, "rb") as fh:
        encoded = base64.b64encode(fh.read()).decode("ascii")

    return {
        "url": file_url,
        "filename": os.path.basename(path),
        "base64": f"data:{mimetype};base64,{encoded}",
    }


def decode_backup(backup) -> Optional[Tuple[str, bytes]]:
    """(mimetype, bytes) from a stored backup, or None if it cannot be read."""
    raw = backup.get("base64") if isinstance(backup, dict) else None
    if not isinstance(raw, str) or not raw:
        return None

    match = _DATA_URI_RE.match(raw)
    if match:
        mimetype, data = match.groups()
    else:
        mimetype = mimetypes.guess_type(backup.get("filename") or "")[0] or BACKUP_FALLBACK_MIMETYPE
        data = raw

    try:
        return mimetype, base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("Unreadable attachment backup for %s", backup.get("filename"))
        return None


def find_attachment_backup(filename) -> Optional[Tuple[str, bytes]]:
    """Newest stored backup for a secret attachment filename."""
    for chat in ChatMessage.query.order_by(ChatMessage.created_at.desc()).all():
        for backup in chat.attachment_backups or []:
            if isinstance(backup, dict) and backup.get("filename") == filename:
                decoded = decode_backup(backup)
                if decoded is not None:
                    return decoded
    return None


def create_chat_message(*, message: str, attachments: list[str], sender_ip, user_agent) -> ChatMessage:
    if not message or not message.strip():
        raise InvariantViolation("message is required")

    backups = []
    for url in attachments:
        backup = encode_backup(url)
        if backup is None:
            logger.warning("No backup written for chat attachment %s", url)
            continue
        backups.append(backup)

    chat = ChatMessage(
        message=message.strip(),
        attachments=list(attachments),
        attachment_backups=backups,
        sender_ip=sender_ip,
        user_agent=(user_agent or "")[:500] or None,
    )

    with transactional():
        db.session.add(chat)

    return chat


def list_chat_messages(*, unread_only: bool = False):
    query = ChatMessage.query
    if unread_only:
        query = query.filter(ChatMessage.is_read.is_(False))
    return query.order_by(ChatMessage.created_at.desc()).all()


def mark_chat_message_read(message_id) -> ChatMessage:
    chat = db.session.get(ChatMessage, message_id)
    if chat is None:
        abort(404, description="Chat message not found")

    with transactional():
        chat.is_read = True

        log_action(
            action="chat_message.read",
            entity_type="chat_message",
            entity_id=chat.id,
        )

    return chat
