import base64
import os
from urllib.parse import parse_qs

import httpx
import pytest

from practice_site.services.email_service import (
    ATTACHMENTS_REMOVED_TAG,
    build_subject,
    check_email_connection,
    collect_attachments,
    send_support_email,
)


@pytest.fixture
def mail_config(app):
    app.config.update(
        MAILGUN_API_KEY="key-123",
        MAILGUN_DOMAIN="mg.example.com",
        MAILGUN_API_BASE="https://api.mailgun.test/v3",
        RECIPIENT_EMAIL="clinic@example.com",
        MAIL_FROM=None,
    )
    return app.config


def _recording_transport(status_codes):
    """Answer with the given status codes in turn and keep every request."""
    requests = []
    codes = iter(status_codes)

    def handler(request):
        request.read()
        requests.append(request)
        return httpx.Response(next(codes), json={"message": "ok"})

    return httpx.MockTransport(handler), requests


def _form(request):
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


def _write_upload(app, folder, name, content=b"\x89PNG fake"):
    directory = os.path.join(app.config["UPLOAD_FOLDER"], folder)
    os.makedirs(directory, exist_ok=True)
    with open(os.path.join(directory, name), "wb") as fh:
        fh.write(content)
    return f"/uploads/{folder}/{name}"


def test_subject_formats():
    assert build_subject({"type": "bug", "subject": " Botão quebrado "}) == "[BUG] Botão quebrado"
    assert build_subject({"type": "contact"}) == "[CONTACT] Mensagem sem assunto"
    assert build_subject({"message": "oi"}) == "[SUPPORT] Mensagem sem assunto"

    long_text = "x" * 80
    assert build_subject({"type": "secret-message", "message": long_text}) == "x" * 50 + "..."
    assert build_subject({"type": "secret-message", "message": "curta"}) == "curta"


def test_missing_settings_are_reported_without_a_request(app):
    transport, requests = _recording_transport([200])

    result = send_support_email({"message": "Olá"}, transport=transport)

    assert result["success"] is False
    assert "MAILGUN_API_KEY" in result["error"]
    assert requests == []


def test_sends_through_mailgun(mail_config):
    transport, requests = _recording_transport([200])

    result = send_support_email(
        {"name": "Ana", "email": "ana@example.com", "subject": "Agenda", "message": "Posso remarcar?"},
        transport=transport,
    )

    assert result == {"success": True, "error": None}
    (request,) = requests
    assert str(request.url) == "https://api.mailgun.test/v3/mg.example.com/messages"
    assert request.headers["Authorization"] == "Basic " + base64.b64encode(b"api:key-123").decode()

    form = _form(request)
    assert form["to"] == "clinic@example.com"
    assert form["from"] == "Sistema de Contato <noreply@mg.example.com>"
    assert form["subject"] == "[SUPPORT] Agenda"
    assert form["h:Reply-To"] == "ana@example.com"
    assert "Posso remarcar?" in form["text"]


def test_recipient_override(mail_config):
    transport, requests = _recording_transport([200])

    send_support_email({"message": "segredo", "recipient_override": "chat@example.com"}, transport=transport)

    assert _form(requests[0])["to"] == "chat@example.com"


def test_collect_attachments_reads_existing_files(app):
    url = _write_upload(app, "support", "print.png")

    files, info = collect_attachments({
        "attachments": [url, "/uploads/support/missing.png"],
        "server_url": "https://site.example/",
    })

    assert files == [("attachment", ("print.png", b"\x89PNG fake", "image/png"))]
    assert "ANEXOS (2)" in info
    assert "missing.png (arquivo não encontrado no servidor)" in info
    assert "https://site.example/uploads/support/print.png" in info


def test_retries_without_attachments(mail_config, app):
    url = _write_upload(app, "support", "grande.png")
    transport, requests = _recording_transport([413, 200])

    result = send_support_email(
        {"subject": "Erro", "message": "Veja o print", "attachments": [url]},
        transport=transport,
    )

    assert result["success"] is True
    assert len(requests) == 2
    assert b"grande.png" in requests[0].content

    retry = _form(requests[1])
    assert retry["subject"] == f"[SUPPORT] Erro {ATTACHMENTS_REMOVED_TAG}"
    assert "Os anexos foram removidos" in retry["text"]


def test_http_failure_without_attachments_is_not_retried(mail_config):
    transport, requests = _recording_transport([500, 200])

    result = send_support_email({"message": "Olá"}, transport=transport)

    assert result["success"] is False
    assert "500" in result["error"]
    assert len(requests) == 1


def test_connection_check(app, mail_config):
    transport, requests = _recording_transport([200])

    result = check_email_connection(transport=transport)

    assert result["success"] is True
    assert result["missing"] == []
    assert _form(requests[0])["subject"] == "[SUPPORT] Teste de conexão"


def test_connection_check_lists_missing_settings(app):
    result = check_email_connection()

    assert result["success"] is False
    assert result["missing"] == ["MAILGUN_API_KEY", "MAILGUN_DOMAIN", "RECIPIENT_EMAIL"]
