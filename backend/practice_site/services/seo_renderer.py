"""
Server-side Open Graph / Twitter meta tags.

Link-preview crawlers do not execute the SPA, so the tags are rendered from
site configuration and injected into the static shell.
"""
import logging
import os
import re
from typing import TypedDict
from urllib.parse import urlsplit

from flask import current_app
from markupsafe import escape
from sqlalchemy.exc import SQLAlchemyError

from practice_site.application.site_config import get_config_values

logger = logging.getLogger(__name__)

DEFAULT_SITE_NAME = "Consultório de Psicologia"
DEFAULT_DESCRIPTION = (
    "Psicóloga especialista em terapia. Atendimento presencial e online. "
    "Agende sua consulta."
)
DEFAULT_KEYWORDS = "psicóloga, terapia, saúde mental, psicologia, consultório"
DEFAULT_TWITTER_CARD = "summary_large_image"
THEME_COLOR = "#ec4899"

INJECTION_MARKER = '<meta name="x-seo-injected" content="server-side">'

_TITLE_RE = re.compile(r"<title>.*?</title>", re.IGNORECASE | re.DOTALL)
_HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)


class SeoData(TypedDict):
    title: str
    description: str
    keywords: str
    author: str
    og_title: str
    og_description: str
    og_image: str
    og_url: str
    site_name: str
    twitter_card: str
    enable_google_indexing: bool


def _base_url(url):
    parts = urlsplit(url or "")
    if not parts.scheme or not parts.netloc:
        return ""
    return f"{parts.scheme}://{parts.netloc}"


def _as_dict(value):
    """Config values are free-form JSON; anything but an object counts as unset."""
    return value if isinstance(value, dict) else {}


def _text(value):
    return value if isinstance(value, str) else ""


def fallback_seo_data(url) -> SeoData:
    return {
        "title": DEFAULT_SITE_NAME,
        "description": DEFAULT_DESCRIPTION,
        "keywords": DEFAULT_KEYWORDS,
        "author": DEFAULT_SITE_NAME,
        "og_title": DEFAULT_SITE_NAME,
        "og_description": DEFAULT_DESCRIPTION,
        "og_image": "",
        "og_url": url,
        "site_name": DEFAULT_SITE_NAME,
        "twitter_card": DEFAULT_TWITTER_CARD,
        "enable_google_indexing": True,
    }


def get_seo_data(url) -> SeoData:
    """
    Merge seo_meta, marketing_pixels and general_info over the defaults.

    marketing_pixels.ogImage (where the upload screen stores it) wins over
    seo_meta.ogImage; relative images are made absolute against url.
    """
    try:
        values = get_config_values("seo_meta", "marketing_pixels", "general_info")
    except SQLAlchemyError as exc:
        logger.error("Could not load SEO configuration: %s", exc)
        return fallback_seo_data(url)

    seo = _as_dict(values.get("seo_meta"))
    marketing = _as_dict(values.get("marketing_pixels"))
    general = _as_dict(values.get("general_info"))

    site_name = general.get("siteName") or DEFAULT_SITE_NAME
    default_title = general.get("headerName") or site_name
    author = general.get("headerName") or site_name

    og_image = _text(marketing.get("ogImage")) or _text(seo.get("ogImage"))
    if og_image and not og_image.startswith(("http://", "https://")):
        og_image = f"{_base_url(url)}{og_image}"

    indexing = marketing.get("enableGoogleIndexing")

    return {
        "title": seo.get("metaTitle") or default_title,
        "description": seo.get("metaDescription") or DEFAULT_DESCRIPTION,
        "keywords": seo.get("metaKeywords") or DEFAULT_KEYWORDS,
        "author": author,
        "og_title": marketing.get("ogTitle") or seo.get("ogTitle") or seo.get("metaTitle") or default_title,
        "og_description": (
            marketing.get("ogDescription") or seo.get("ogDescription")
            or seo.get("metaDescription") or DEFAULT_DESCRIPTION
        ),
        "og_image": og_image,
        "og_url": url,
        "site_name": site_name,
        "twitter_card": seo.get("twitterCard") or DEFAULT_TWITTER_CARD,
        "enable_google_indexing": True if indexing is None else bool(indexing),
    }


def generate_meta_tags(data: SeoData) -> str:
    robots = "index, follow" if data["enable_google_indexing"] else "noindex, nofollow"
    url = escape(data["og_url"])
    og_title = escape(data["og_title"])
    og_description = escape(data["og_description"])

    tags = [
        INJECTION_MARKER,
        f'<meta name="description" content="{escape(data["description"])}">',
        f'<meta name="keywords" content="{escape(data["keywords"])}">',
        f'<meta name="author" content="{escape(data["author"])}">',
        f'<meta name="robots" content="{robots}">',
        f'<meta name="googlebot" content="{robots}">',
        '<meta property="og:type" content="website">',
        f'<meta property="og:url" content="{url}">',
        f'<meta property="og:title" content="{og_title}">',
        f'<meta property="og:description" content="{og_description}">',
        f'<meta property="og:site_name" content="{escape(data["site_name"])}">',
    ]

    if data["og_image"]:
        image = escape(data["og_image"])
        tags += [
            f'<meta property="og:image" content="{image}">',
            '<meta property="og:image:width" content="1200">',
            '<meta property="og:image:height" content="630">',
            f'<meta property="og:image:alt" content="{og_title}">',
        ]

    tags += [
        f'<meta property="twitter:card" content="{escape(data["twitter_card"])}">',
        f'<meta property="twitter:url" content="{url}">',
        f'<meta property="twitter:title" content="{og_title}">',
        f'<meta property="twitter:description" content="{og_description}">',
    ]

    if data["og_image"]:
        tags.append(f'<meta property="twitter:image" content="{escape(data["og_image"])}">')

    tags += [
        f'<meta name="theme-color" content="{THEME_COLOR}">',
        f'<link rel="canonical" href="{url}">',
    ]

    return "\n    ".join(tags)


def inject_seo_into_html(html: str, data: SeoData) -> str:
    """Replace <title> and insert the meta tags before </head>."""
    html = _TITLE_RE.sub(lambda _: f"<title>{escape(data['title'])}</title>", html, count=1)

    if not _HEAD_CLOSE_RE.search(html):
        logger.warning("No </head> tag found, SEO tags not injected")
        return html

    tags = generate_meta_tags(data)
    return _HEAD_CLOSE_RE.sub(lambda _: f"    {tags}\n  </head>", html, count=1)


def find_base_html_path():
    for path in current_app.config["SPA_INDEX_PATHS"]:
        if os.path.isfile(path):
            return path
    return None


def get_base_html() -> str:
    """Built SPA shell, falling back to the development index."""
    path = find_base_html_path()
    if path is None:
        raise FileNotFoundError("index.html not found in any configured location")

    with open(path, encoding="utf-8") as fh:
        return fh.read()


def render_seo_html(url) -> str:
    return inject_seo_into_html(get_base_html(), get_seo_data(url))
