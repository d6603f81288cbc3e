from practice_site.extensions import db
from practice_site.models.article import Article
from practice_site.models.base import utc_now
from practice_site.domain.invariants.content import assert_item
from practice_site.domain.lifecycle.article import article_status, assert_article_transition
from practice_site.utils.audit import log_action
from practice_site.utils.transaction import transactional
from .ordered import get_item

FEATURED_LIMIT = 6


def _published_query():
    return Article.query.filter(
        Article.is_published.is_(True),
        Article.is_active.is_(True),
    )


def list_published_articles():
    return (
        _published_query()
        .order_by(Article.order.asc(), Article.published_at.desc())
        .all()
    )


def list_featured_articles(limit: int = FEATURED_LIMIT):
    return (
        _published_query()
        .filter(Article.is_featured.is_(True))
        .order_by(Article.order.asc(), Article.published_at.desc())
        .limit(limit)
        .all()
    )


def get_published_article(article_id):
    return _published_query().filter(Article.id == article_id).first_or_404()


def _set_published(article_id, publish: bool):
    article = get_item(Article, article_id)
    to_status = "published" if publish else "draft"

    with transactional():
        from_status = article_status(article)
        assert_article_transition(from_status=from_status, to_status=to_status)

        if from_status == to_status:
            return article

        article.is_published = publish
        if publish:
            article.published_at = utc_now()

        assert_item(article)

        log_action(
            action=f"article.{'publish' if publish else 'unpublish'}",
            entity_type="article",
            entity_id=article.id,
            payload={"from": from_status, "to": to_status},
        )

    return article


def publish_article(article_id):
    """Publishing an already published article keeps its published_at."""
    return _set_published(article_id, True)


def unpublish_article(article_id):
    return _set_published(article_id, False)
