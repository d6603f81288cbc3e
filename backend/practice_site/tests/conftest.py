import io

import pytest
from PIL import Image

from practice_site import create_app
from practice_site.extensions import db
from practice_site.models.admin_user import AdminUser

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"

SHELL_HTML = """<!DOCTYPE html>
<html lang="pt-BR">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Vite App</title>
  </head>
  <body>
    <div id="root"></div>
  </body>
</html>
"""


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")

    shell = tmp_path / "dist" / "index.html"
    shell.parent.mkdir()
    shell.write_text(SHELL_HTML, encoding="utf-8")

    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    app.config["SPA_INDEX_PATHS"] = [str(shell)]

    with app.app_context():
        db.create_all()

        admin = AdminUser(username=ADMIN_USERNAME)
        admin.set_password(ADMIN_PASSWORD)
        db.session.add(admin)
        db.session.commit()

        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/admin/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


def make_image_bytes(size=(1600, 1200), fmt="PNG", color=(200, 80, 120)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, fmt)
    buffer.seek(0)
    return buffer


@pytest.fixture
def image_file():
    return make_image_bytes
