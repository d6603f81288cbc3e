import io
import os

from practice_site.models.chat_message import ChatMessage
from practice_site.models.support_message import SupportMessage
from practice_site.tests.conftest import make_image_bytes


def test_support_message_is_kept_when_email_is_not_configured(client, auth_headers):
    response = client.post(
        "/api/admin/support-messages",
        json={"name": "Admin", "email": "admin@example.com", "subject": "Ajuda", "message": "Erro no painel", "type": "bug"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["email_sent"] is False
    assert "MAILGUN_API_KEY" in body["email_error"]
    assert SupportMessage.query.count() == 1


def test_support_message_requires_text_and_known_type(client, auth_headers):
    assert client.post("/api/admin/support-messages", json={"name": "x"}, headers=auth_headers).status_code == 400
    assert client.post(
        "/api/admin/support-messages", json={"message": "x", "type": "spam"}, headers=auth_headers,
    ).status_code == 400


def test_admin_response_stamps_responded_at(client, auth_headers):
    created = client.post("/api/admin/support-messages", json={"message": "Olá"}, headers=auth_headers).get_json()
    assert created["responded_at"] is None

    response = client.put(
        f"/api/admin/support-messages/{created['id']}",
        json={"admin_response": "Resolvido", "is_read": True},
        headers=auth_headers,
    )

    body = response.get_json()
    assert response.status_code == 200
    assert body["admin_response"] == "Resolvido"
    assert body["is_read"] is True
    assert body["responded_at"] is not None


def test_delete_support_message(client, auth_headers):
    created = client.post("/api/admin/support-messages", json={"message": "Apagar"}, headers=auth_headers).get_json()

    assert client.delete(f"/api/admin/support-messages/{created['id']}", headers=auth_headers).status_code == 200
    assert client.get("/api/admin/support-messages", headers=auth_headers).get_json() == []


def test_email_connection_reports_missing_settings(client, auth_headers):
    response = client.post("/api/admin/test-email-connection", headers=auth_headers)

    assert response.status_code == 500
    assert response.get_json()["missing"] == ["MAILGUN_API_KEY", "MAILGUN_DOMAIN", "RECIPIENT_EMAIL"]


def test_secret_send_requires_message(client):
    response = client.post("/api/secret/send", data={"message": "  "}, content_type="multipart/form-data")
    assert response.status_code == 400


def test_secret_send_stores_message_with_attachment_backups(client, app):
    response = client.post(
        "/api/secret/send",
        data={
            "message": "Mensagem anônima",
            "attachments": [(make_image_bytes((900, 900)), "foto.png", "image/png")],
        },
        content_type="multipart/form-data",
        headers={"User-Agent": "pytest-agent", "X-Real-IP": "198.51.100.4"},
    )

    # No CHAT_RECIPIENT_EMAIL in testing, but the message is already stored
    assert response.status_code == 500
    chat = ChatMessage.query.one()
    assert chat.message == "Mensagem anônima"
    assert chat.sender_ip == "198.51.100.4"
    assert chat.attachments[0].startswith("/uploads/secret/")
    assert chat.attachments[0].endswith(".webp")
    assert chat.attachment_backups[0]["base64"]


def test_secret_send_skips_non_image_attachments(client):
    client.post(
        "/api/secret/send",
        data={
            "message": "Com anexo inválido",
            "attachments": [(io.BytesIO(b"plain text"), "notes.txt", "text/plain")],
        },
        content_type="multipart/form-data",
    )

    chat = ChatMessage.query.one()
    assert chat.attachments == []


def test_chat_messages_can_be_marked_read(client, auth_headers):
    client.post("/api/secret/send", data={"message": "Primeira"}, content_type="multipart/form-data")
    chat_id = ChatMessage.query.one().id

    unread = client.get("/api/admin/chat-messages?unread=1", headers=auth_headers).get_json()
    assert [item["id"] for item in unread] == [chat_id]

    response = client.post(f"/api/admin/chat-messages/{chat_id}/read", headers=auth_headers)
    assert response.get_json()["is_read"] is True
    assert client.get("/api/admin/chat-messages?unread=1", headers=auth_headers).get_json() == []


def _send_secret_with_image(client):
    client.post(
        "/api/secret/send",
        data={
            "message": "Com foto",
            "attachments": [(make_image_bytes((640, 480)), "foto.png", "image/png")],
        },
        content_type="multipart/form-data",
    )
    return ChatMessage.query.one()


def test_secret_image_is_served_from_disk(client):
    chat = _send_secret_with_image(client)
    filename = chat.attachments[0].rsplit("/", 1)[-1]

    response = client.get(f"/api/secret/image/{filename}")

    assert response.status_code == 200
    assert response.data[:4] == b"RIFF"
    assert chat.attachment_backups[0]["base64"].startswith("data:image/")


def test_secret_image_falls_back_to_base64_backup(client, app):
    chat = _send_secret_with_image(client)
    filename = chat.attachments[0].rsplit("/", 1)[-1]
    stored = os.path.join(app.config["UPLOAD_FOLDER"], "secret", filename)

    with open(stored, "rb") as fh:
        original = fh.read()
    os.remove(stored)

    response = client.get(f"/api/secret/image/{filename}")

    assert response.status_code == 200
    assert response.mimetype == "image/webp"
    assert response.headers["Cache-Control"] == "public, max-age=86400"
    assert response.data == original


def test_secret_image_missing_everywhere_is_404(client):
    response = client.get("/api/secret/image/nope.webp")

    assert response.status_code == 404
    assert response.get_json()["error"]
