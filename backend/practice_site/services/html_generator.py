import logging
import os
import re

from flask import current_app

from .seo_renderer import find_base_html_path, generate_meta_tags, get_seo_data

logger = logging.getLogger(__name__)

BLOCK_START = "<!-- seo:start -->"
BLOCK_END = "<!-- seo:end -->"

_BLOCK_RE = re.compile(re.escape(BLOCK_START) + r".*?" + re.escape(BLOCK_END) + r"\n?", re.DOTALL)
_VIEWPORT_RE = re.compile(r"<meta[^>]+name=[\"']viewport[\"'][^>]*>", re.IGNORECASE)
_HEAD_CLOSE_RE = re.compile(r"</head>", re.IGNORECASE)


def seo_html_path():
    base = find_base_html_path()
    if base is None:
        return None
    return os.path.join(os.path.dirname(base), current_app.config["SEO_HTML_FILENAME"])


def is_html_statically_generated():
    path = seo_html_path()
    return bool(path) and os.path.isfile(path)


def build_static_html(html, tags):
    """Insert the tag block right after the viewport meta (or before </head>)."""
    html = _BLOCK_RE.sub("", html)
    block = f"{BLOCK_START}\n    {tags}\n    {BLOCK_END}\n"

    viewport = _VIEWPORT_RE.search(html)
    if viewport:
        end = viewport.end()
        return f"{html[:end]}\n    {block}{html[end:]}"

    head_close = _HEAD_CLOSE_RE.search(html)
    if head_close:
        start = head_close.start()
        return f"{html[:start]}{block}{html[start:]}"

    raise ValueError("HTML shell has no <head> to inject into")


def regenerate_static_html(base_url):
    """
    Write index-seo.html next to the shell with the current SEO tags.
    The original index.html is left untouched. Returns the written path.
    """
    base = find_base_html_path()
    if base is None:
        raise FileNotFoundError("index.html not found in any configured location")

    with open(base, encoding="utf-8") as fh:
        html = fh.read()

    tags = generate_meta_tags(get_seo_data(base_url.rstrip("/") + "/"))
    output_path = seo_html_path()

    with open(output_path, "w", encoding="utf-8") as fh:
        fh.write(build_static_html(html, tags))

    logger.info("Static SEO HTML written to %s", output_path)
    return output_path
