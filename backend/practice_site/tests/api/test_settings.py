from practice_site.domain.defaults import CONTACT_CARD, COOKIE_SETTINGS, FOOTER_SETTINGS
from practice_site.extensions import db
from practice_site.models.contact_settings import ContactSettings


def test_singletons_are_created_with_defaults_on_first_read(client):
    for path in ("contact-settings", "footer-settings", "cookie-settings", "privacy-policy", "terms-of-use"):
        response = client.get(f"/api/{path}")
        assert response.status_code == 200, path

    cookie = client.get("/api/cookie-settings").get_json()
    assert cookie["title"] == COOKIE_SETTINGS["title"]
    assert cookie["is_enabled"] is True


def test_repeated_reads_return_the_same_row(client):
    first = client.get("/api/contact-settings").get_json()
    second = client.get("/api/contact-settings").get_json()

    assert first["id"] == second["id"]
    assert ContactSettings.query.count() == 1


def test_missing_cards_are_backfilled(client, app):
    row = ContactSettings(contact_items=[], schedule_info={}, location_info={})
    db.session.add(row)
    db.session.commit()

    body = client.get("/api/contact-settings").get_json()

    assert body["contact_card"] == CONTACT_CARD
    assert body["info_card"]["title"]


def test_contact_update_is_a_shallow_merge(client, auth_headers):
    before = client.get("/api/contact-settings").get_json()
    new_schedule = {"weekdays": "Seg a Sex: 9h às 17h"}

    response = client.put("/api/admin/contact-settings", json={"schedule_info": new_schedule}, headers=auth_headers)

    assert response.status_code == 200
    body = response.get_json()
    assert body["schedule_info"] == new_schedule
    assert body["contact_items"] == before["contact_items"]


def test_contact_update_keeps_json_shapes(client, auth_headers):
    response = client.put(
        "/api/admin/contact-settings",
        json={"contact_items": {"not": "a list"}},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_admin_can_read_contact_and_footer(client, auth_headers):
    assert client.get("/api/admin/contact-settings", headers=auth_headers).status_code == 200
    assert client.get("/api/admin/footer-settings", headers=auth_headers).status_code == 200


def test_footer_reset_restores_defaults(client, auth_headers):
    client.put("/api/admin/footer-settings", json={"trust_seals": []}, headers=auth_headers)
    assert client.get("/api/footer-settings").get_json()["trust_seals"] == []

    response = client.post("/api/admin/reset-footer-badges", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["footer"]["trust_seals"] == FOOTER_SETTINGS["trust_seals"]
    assert client.get("/api/footer-settings").get_json()["trust_seals"] == FOOTER_SETTINGS["trust_seals"]


def test_privacy_policy_update_stamps_last_updated(client, auth_headers):
    before = client.get("/api/privacy-policy").get_json()

    response = client.put(
        "/api/admin/privacy-policy",
        json={"content": "<h2>Nova política</h2>"},
        headers=auth_headers,
    )

    body = response.get_json()
    assert response.status_code == 200
    assert body["content"] == "<h2>Nova política</h2>"
    assert body["title"] == before["title"]
    assert body["last_updated"] >= before["last_updated"]


def test_terms_content_cannot_be_blank(client, auth_headers):
    response = client.put("/api/admin/terms-of-use", json={"content": "  "}, headers=auth_headers)
    assert response.status_code == 400


def test_cookie_settings_update(client, auth_headers):
    response = client.put(
        "/api/admin/cookie-settings",
        json={"is_enabled": False, "position": "top"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert client.get("/api/cookie-settings").get_json()["is_enabled"] is False
