"""
Outbound email through the Mailgun HTTP API.

Delivery problems never raise: callers get {"success": bool, "error": str|None}
and decide what to tell the visitor. Messages are stored before sending, so a
failed delivery loses nothing.
"""
import logging
import mimetypes
import os
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from flask import current_app

from practice_site.utils.media import url_to_path

logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = ("MAILGUN_API_KEY", "MAILGUN_DOMAIN", "RECIPIENT_EMAIL")
SECRET_MESSAGE_TYPE = "secret-message"
ATTACHMENTS_REMOVED_TAG = "[ANEXOS REMOVIDOS]"


def missing_settings(names=REQUIRED_SETTINGS) -> list[str]:
    return [name for name in names if not current_app.config.get(name)]


def build_subject(message_data: dict[str, Any]) -> str:
    subject = (message_data.get("subject") or "").strip()
    message_type = message_data.get("type") or "support"

    if subject:
        return f"[{message_type.upper()}] {subject}"

    if message_type == SECRET_MESSAGE_TYPE:
        text = message_data.get("message") or ""
        return text[:50] + ("..." if len(text) > 50 else "")

    return f"[{message_type.upper()}] Mensagem sem assunto"


def _resolve_attachment(url: str, message_type: str) -> tuple[Optional[str], str]:
    """Local path (if the file exists) and the public /uploads/ URL."""
    if url.startswith("/uploads/"):
        web_url = url
    elif url.startswith("uploads/"):
        web_url = "/" + url
    else:
        folder = "secret" if message_type == SECRET_MESSAGE_TYPE else "support"
        web_url = f"/uploads/{folder}/{os.path.basename(url)}"

    path = url_to_path(web_url)
    return (path if path and os.path.exists(path) else None), web_url


def collect_attachments(message_data: dict[str, Any]):
    """
    Read local files for every attachment URL.

    Returns (files for the multipart request, text block for the body).
    """
    urls = message_data.get("attachments") or []
    if isinstance(urls, str):
        urls = [urls]
    if not urls:
        return [], ""

    server_url = (message_data.get("server_url") or "").rstrip("/")
    message_type = message_data.get("type") or "support"

    files = []
    lines = [f"\n\nANEXOS ({len(urls)}):\n"]
    links = []

    for index, url in enumerate(urls, start=1):
        if not isinstance(url, str) or not url:
            lines.append(f"{index}. (anexo inválido)")
            continue

        path, web_url = _resolve_attachment(url, message_type)
        filename = os.path.basename(web_url)

        if server_url:
            links.append(f"{server_url}{web_url}")

        if path is None:
            logger.warning("Attachment not found on disk: %s", web_url)
            lines.append(f"{index}. {filename} (arquivo não encontrado no servidor)")
            continue

        with open(path, "rb") as fh:
            content = fh.read()

        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        files.append(("attachment", (filename, content, content_type)))
        lines.append(f"{index}. {filename} ({round(len(content) / 1024)}KB) anexada ao email")

    if links:
        lines.append("\nLINKS PARA VISUALIZAÇÃO:")
        lines.extend(f"- {os.path.basename(link)}: {link}" for link in dict.fromkeys(links))

    return files, "\n".join(lines)


def build_body(message_data: dict[str, Any], attachment_info: str = "") -> str:
    sent_at = datetime.now(timezone.utc).strftime("%d/%m/%Y %H:%M UTC")
    return (
        "Nova mensagem recebida via sistema web:\n\n"
        f"Tipo: {message_data.get('type') or 'support'}\n"
        f"Nome: {message_data.get('name') or '-'}\n"
        f"Email: {message_data.get('email') or '-'}\n"
        f"Assunto: {message_data.get('subject') or 'Contato via site'}\n\n"
        f"Mensagem:\n{message_data.get('message') or ''}"
        f"{attachment_info}\n\n"
        "---\n"
        f"Enviado em: {sent_at}\n"
        "Sistema de Contato Web"
    )


def _post(client: httpx.Client, url: str, data: dict[str, Any], files) -> None:
    response = client.post(url, data=data, files=files or None)
    response.raise_for_status()


def send_support_email(
    message_data: dict[str, Any],
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> dict[str, Any]:
    """
    Send a message to the practice inbox (or recipient_override).

    If the provider rejects the request while attachments are present, one
    retry is made without them and the subject is tagged accordingly.
    """
    missing = missing_settings()
    if missing:
        logger.error("Email not sent, missing settings: %s", ", ".join(missing))
        return {"success": False, "error": f"{missing[0]} not configured"}

    config = current_app.config
    domain = config["MAILGUN_DOMAIN"]
    url = f"{config['MAILGUN_API_BASE'].rstrip('/')}/{domain}/messages"

    files, attachment_info = collect_attachments(message_data)

    data = {
        "from": config.get("MAIL_FROM") or f"Sistema de Contato <noreply@{domain}>",
        "to": message_data.get("recipient_override") or config["RECIPIENT_EMAIL"],
        "subject": build_subject(message_data),
        "text": build_body(message_data, attachment_info),
    }
    if message_data.get("email"):
        data["h:Reply-To"] = message_data["email"]

    try:
        with httpx.Client(
            auth=("api", config["MAILGUN_API_KEY"]),
            timeout=config.get("MAIL_TIMEOUT", 30.0),
            transport=transport,
        ) as client:
            try:
                _post(client, url, data, files)
            except httpx.HTTPError as exc:
                if not files:
                    raise

                logger.warning("Email with %s attachment(s) failed (%s), retrying without them", len(files), exc)
                retry = {
                    **data,
                    "subject": f"{data['subject']} {ATTACHMENTS_REMOVED_TAG}",
                    "text": data["text"] + "\n\nOs anexos foram removidos por erro no envio.",
                }
                _post(client, url, retry, None)
                logger.info("Email sent without attachments to %s", data["to"])
                return {"success": True, "error": "Attachments removed after delivery error"}

    except httpx.HTTPError as exc:
        logger.error(f"Mailgun delivery failed: {exc}")
        return {"success": False, "error": str(exc)}

    logger.info("Email sent to %s (%s attachment(s))", data["to"], len(files))
    return {"success": True, "error": None}


def check_email_connection(*, transport: Optional[httpx.BaseTransport] = None) -> dict[str, Any]:
    """Report missing settings, or send a short test email."""
    missing = missing_settings()
    if missing:
        return {
            "success": False,
            "error": f"Missing settings: {', '.join(missing)}",
            "missing": missing,
        }

    result = send_support_email(
        {
            "name": "Teste do Sistema",
            "email": current_app.config["RECIPIENT_EMAIL"],
            "subject": "Teste de conexão",
            "message": "Este é um email de teste para verificar a configuração de envio.",
            "type": "support",
        },
        transport=transport,
    )
    return {**result, "missing": []}
