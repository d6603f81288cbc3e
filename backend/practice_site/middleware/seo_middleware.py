from flask import request, make_response, current_app
from practice_site.services.bot_detector import is_social_media_bot, detected_bot_name
from practice_site.services.seo_renderer import render_seo_html
from practice_site.utils.request_info import public_base_url

# Paths that never serve the SPA shell
PASSTHROUGH_PREFIXES = ("/api", "/uploads", "/openapi", "/swagger", "/robots.txt")


def seo_middleware(app):
    @app.before_request
    def serve_prerendered_html_to_bots():
        if request.method != "GET" or request.path.startswith(PASSTHROUGH_PREFIXES):
            return None

        user_agent = request.headers.get("User-Agent", "")
        if not is_social_media_bot(user_agent):
            return None

        url = f"{public_base_url()}{request.full_path.rstrip('?')}"

        try:
            html = render_seo_html(url)
        except OSError as exc:
            current_app.logger.warning(f"SEO injection failed for {url}: {exc}")
            return None
        except Exception:
            # Bots still get the plain shell
            current_app.logger.exception(f"SEO injection failed for {url}")
            return None

        current_app.logger.info(f"Served SEO HTML to {detected_bot_name(user_agent)} for {url}")

        response = make_response(html)
        response.headers["Content-Type"] = "text/html; charset=utf-8"
        response.headers["Cache-Control"] = "public, max-age=3600"
        response.headers["Vary"] = "User-Agent, Accept-Encoding"
        response.headers["X-Bot-Detected"] = "true"
        response.headers["X-SEO-Injected"] = "server-side"
        return response
