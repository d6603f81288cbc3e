from flask import request, jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.content.articles import (
    get_published_article,
    list_featured_articles,
    list_published_articles,
    publish_article,
    unpublish_article,
)
from practice_site.application.content.ordered import get_item, update_item
from practice_site.models.article import Article
from practice_site.normalizers.article import normalize_article
from practice_site.utils.decorators import roles_required
from practice_site.utils.media import delete_file, save_image
from .collections import register_collection
from . import api_bp

register_collection("articles", Article, normalize_article, public=False)


# ------------------------
# Public
# ------------------------

@api_bp.route("/articles", methods=["GET"])
def public_articles():
    return jsonify([normalize_article(article) for article in list_published_articles()])


@api_bp.route("/articles/featured", methods=["GET"])
def featured_articles():
    return jsonify([normalize_article(article) for article in list_featured_articles()])


@api_bp.route("/articles/<article_id>", methods=["GET"])
def public_article(article_id):
    return jsonify(normalize_article(get_published_article(article_id)))


# ------------------------
# Admin
# ------------------------

@api_bp.route("/admin/articles/<article_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_get_article(article_id):
    return jsonify(normalize_article(get_item(Article, article_id), admin=True))


@api_bp.route("/admin/articles/<article_id>/publish", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_publish_article(article_id):
    return jsonify(normalize_article(publish_article(article_id), admin=True))


@api_bp.route("/admin/articles/<article_id>/unpublish", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_unpublish_article(article_id):
    return jsonify(normalize_article(unpublish_article(article_id), admin=True))


@api_bp.route("/admin/articles/<article_id>/upload", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_upload_article_image(article_id):
    article = get_item(Article, article_id)
    previous = article.card_image

    image_url = save_image(request.files.get("image"), "articles")
    try:
        article = update_item(Article, article_id, {"card_image": image_url})
    except Exception:
        delete_file(image_url)
        raise

    if previous and previous != image_url:
        delete_file(previous)

    return jsonify({"image_url": image_url, "article": normalize_article(article, admin=True)})
