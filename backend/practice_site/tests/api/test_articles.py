from datetime import datetime, timedelta, timezone
from email.utils import format_datetime


def _article(client, headers, title, **extra):
    payload = {
        "title": title,
        "description": f"{title} description",
        "content": "<p>Body</p>",
        "author": "Dra. Silva",
        **extra,
    }
    response = client.post("/api/admin/articles", json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_new_article_is_a_draft_with_default_category(client, auth_headers):
    article = _article(client, auth_headers, "Ansiedade")

    assert article["is_published"] is False
    assert article["category"] == "Psicologia"
    assert article["published_at"] is None


def test_draft_is_hidden_from_public_until_published(client, auth_headers):
    article = _article(client, auth_headers, "Rascunho")

    assert client.get("/api/articles").get_json() == []
    assert client.get(f"/api/articles/{article['id']}").status_code == 404

    response = client.post(f"/api/admin/articles/{article['id']}/publish", headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["published_at"] is not None

    public = client.get(f"/api/articles/{article['id']}")
    assert public.status_code == 200
    assert "is_published" not in public.get_json()


def test_publish_twice_keeps_published_at(client, auth_headers):
    article = _article(client, auth_headers, "Duplo")

    first = client.post(f"/api/admin/articles/{article['id']}/publish", headers=auth_headers).get_json()
    second = client.post(f"/api/admin/articles/{article['id']}/publish", headers=auth_headers).get_json()

    assert first["published_at"] == second["published_at"]


def test_unpublish_hides_article_again(client, auth_headers):
    article = _article(client, auth_headers, "Temporário")
    client.post(f"/api/admin/articles/{article['id']}/publish", headers=auth_headers)

    response = client.post(f"/api/admin/articles/{article['id']}/unpublish", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["is_published"] is False
    assert client.get("/api/articles").get_json() == []


def test_featured_is_limited_to_six_published(client, auth_headers):
    for index in range(8):
        article = _article(client, auth_headers, f"Artigo {index}", is_featured=True)
        client.post(f"/api/admin/articles/{article['id']}/publish", headers=auth_headers)
    _article(client, auth_headers, "Destaque rascunho", is_featured=True)

    featured = client.get("/api/articles/featured").get_json()

    assert len(featured) == 6
    assert [item["title"] for item in featured] == [f"Artigo {index}" for index in range(6)]


def test_published_list_follows_admin_order(client, auth_headers):
    first = _article(client, auth_headers, "Primeiro")
    second = _article(client, auth_headers, "Segundo")
    for article in (first, second):
        client.post(f"/api/admin/articles/{article['id']}/publish", headers=auth_headers)

    client.put(
        "/api/admin/articles/reorder",
        json={"items": [{"id": second["id"], "order": 0}, {"id": first["id"], "order": 1}]},
        headers=auth_headers,
    )

    assert [item["title"] for item in client.get("/api/articles").get_json()] == ["Segundo", "Primeiro"]


def test_admin_get_returns_drafts(client, auth_headers):
    article = _article(client, auth_headers, "Interno")

    response = client.get(f"/api/admin/articles/{article['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["title"] == "Interno"


def test_stale_update_is_rejected(client, auth_headers):
    article = _article(client, auth_headers, "Concorrente")
    stale = format_datetime(datetime.now(timezone.utc) - timedelta(days=1), usegmt=True)

    response = client.put(
        f"/api/admin/articles/{article['id']}",
        json={"title": "Outro"},
        headers={**auth_headers, "If-Unmodified-Since": stale},
    )

    assert response.status_code == 409


def test_fresh_update_passes_optimistic_lock(client, auth_headers):
    article = _article(client, auth_headers, "Atual")
    fresh = format_datetime(datetime.now(timezone.utc) + timedelta(minutes=5), usegmt=True)

    response = client.put(
        f"/api/admin/articles/{article['id']}",
        json={"title": "Atualizado"},
        headers={**auth_headers, "If-Unmodified-Since": fresh},
    )

    assert response.status_code == 200
    assert response.get_json()["title"] == "Atualizado"
