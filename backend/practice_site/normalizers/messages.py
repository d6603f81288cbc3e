from .common import iso


def normalize_support_message(message):
    return {
        "id": message.id,
        "name": message.name,
        "email": message.email,
        "subject": message.subject,
        "message": message.message,
        "type": message.type,
        "attachments": message.attachments or [],
        "is_read": message.is_read,
        "admin_response": message.admin_response,
        "responded_at": iso(message.responded_at),
        "created_at": iso(message.created_at),
    }


def normalize_chat_message(message, include_backups=False):
    data = {
        "id": message.id,
        "message": message.message,
        "attachments": message.attachments or [],
        "sender_ip": message.sender_ip,
        "user_agent": message.user_agent,
        "is_read": message.is_read,
        "created_at": iso(message.created_at),
    }

    if include_backups:
        data["attachment_backups"] = message.attachment_backups or []

    return data


def normalize_preference(preference):
    return {
        "key": preference.key,
        "value": preference.value,
        "updated_at": iso(preference.updated_at),
    }
