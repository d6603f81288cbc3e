import os

FACEBOOK_UA = "facebookexternalhit/1.1 (+http://www.facebook.com/externalhit_uatext.php)"
BROWSER_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36"


def test_browsers_get_the_plain_spa_shell(client):
    response = client.get("/sobre", headers={"User-Agent": BROWSER_UA})

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "<title>Vite App</title>" in html
    assert "X-Bot-Detected" not in response.headers


def test_bots_get_injected_meta_tags(client, auth_headers):
    client.post(
        "/api/admin/config",
        json={"key": "seo_meta", "value": {"metaTitle": "Psicologia & Bem-estar", "ogImage": "/uploads/seo/og.jpg"}},
        headers=auth_headers,
    )

    response = client.get("/", headers={"User-Agent": FACEBOOK_UA}, base_url="https://consultorio.example")

    assert response.status_code == 200
    assert response.headers["X-Bot-Detected"] == "true"
    assert response.headers["X-SEO-Injected"] == "server-side"
    assert response.headers["Cache-Control"] == "public, max-age=3600"
    assert response.headers["Vary"] == "User-Agent, Accept-Encoding"

    html = response.get_data(as_text=True)
    assert "<title>Psicologia &amp; Bem-estar</title>" in html
    assert '<meta property="og:image" content="https://consultorio.example/uploads/seo/og.jpg">' in html
    assert html.index('property="og:title"') < html.index("</head>")


def test_bots_do_not_affect_api_routes(client):
    response = client.get("/api/faq", headers={"User-Agent": FACEBOOK_UA})

    assert response.status_code == 200
    assert response.get_json() == []
    assert "X-Bot-Detected" not in response.headers


def test_bot_falls_through_when_shell_is_missing(client, app):
    app.config["SPA_INDEX_PATHS"] = [os.path.join(app.config["UPLOAD_FOLDER"], "missing.html")]

    response = client.get("/", headers={"User-Agent": FACEBOOK_UA})

    assert response.status_code == 404
    assert "X-Bot-Detected" not in response.headers


def test_unknown_api_path_is_json_404(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.get_json()["error"]


def test_seo_preview_and_config(client):
    preview = client.get("/api/seo/preview?url=https://example.com/artigos").get_json()
    config = client.get("/api/seo/config").get_json()

    assert preview["seo"]["og_url"] == "https://example.com/artigos"
    assert '<meta name="robots" content="index, follow">' in preview["meta_tags"]
    assert "facebookexternalhit" in config["bots"]
    assert config["static_html_generated"] is False


def test_seo_test_simulates_a_crawler(client):
    as_json = client.get("/api/seo/test", query_string={"userAgent": "Twitterbot/1.0", "format": "json"}).get_json()
    not_bot = client.get("/api/seo/test", query_string={"userAgent": BROWSER_UA}).get_json()
    as_html = client.get("/api/seo/test", query_string={"userAgent": "LinkedInBot/1.0"})

    assert as_json["is_bot"] is True
    assert as_json["bot"] == "Twitterbot"
    assert not_bot["is_bot"] is False
    assert as_html.mimetype == "text/html"
    assert 'name="x-seo-injected"' in as_html.get_data(as_text=True)


def test_regenerate_static_html_writes_separate_file(client, app):
    shell_path = app.config["SPA_INDEX_PATHS"][0]
    with open(shell_path, encoding="utf-8") as fh:
        original = fh.read()

    response = client.post("/api/seo/regenerate-html", base_url="https://consultorio.example")

    assert response.status_code == 200
    seo_path = response.get_json()["path"]
    assert os.path.basename(seo_path) == "index-seo.html"

    with open(seo_path, encoding="utf-8") as fh:
        generated = fh.read()
    with open(shell_path, encoding="utf-8") as fh:
        assert fh.read() == original

    viewport = generated.index('name="viewport"')
    assert viewport < generated.index("<!-- seo:start -->") < generated.index("</head>")
    assert '<link rel="canonical" href="https://consultorio.example/">' in generated

    # Regenerating replaces the block instead of stacking another one
    client.post("/api/seo/regenerate-html", base_url="https://consultorio.example")
    with open(seo_path, encoding="utf-8") as fh:
        assert fh.read().count("<!-- seo:start -->") == 1

    assert client.get("/api/seo/config").get_json()["static_html_generated"] is True


def test_refresh_cache_returns_debugger_links(client):
    body = client.post("/api/seo/refresh-cache", json={"url": "https://example.com/"}).get_json()

    assert body["success"] is True
    assert body["tools"]["facebook"].endswith("https://example.com/")


def test_non_object_seo_config_falls_back_to_defaults(client, auth_headers):
    client.post("/api/admin/config", json={"key": "seo_meta", "value": "legacy string"}, headers=auth_headers)
    client.post("/api/admin/config", json={"key": "marketing_pixels", "value": {"ogImage": {"url": "/x.jpg"}}}, headers=auth_headers)

    response = client.get("/", headers={"User-Agent": "Twitterbot/1.0"})

    assert response.status_code == 200
    assert response.headers["X-Bot-Detected"] == "true"
    assert "og:image" not in response.get_data(as_text=True)

    preview = client.get("/api/seo/preview").get_json()
    assert preview["seo"]["og_image"] == ""


def test_unexpected_render_errors_fall_through_to_the_shell(client, monkeypatch):
    def broken_render(url):
        raise RuntimeError("template engine exploded")

    monkeypatch.setattr("practice_site.middleware.seo_middleware.render_seo_html", broken_render)

    response = client.get("/servicos", headers={"User-Agent": FACEBOOK_UA})

    assert response.status_code == 200
    assert "X-Bot-Detected" not in response.headers
    assert "<title>Vite App</title>" in response.get_data(as_text=True)
