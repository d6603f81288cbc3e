from .common import iso, normalize_ordered


def normalize_article(article, admin=False):
    """Full article; card listings reuse it and ignore the heavy fields."""
    base = {
        **normalize_ordered(article, admin),
        "title": article.title,
        "subtitle": article.subtitle,
        "badge": article.badge,
        "description": article.description,
        "content": article.content,
        "card_image": article.card_image,
        "author": article.author,
        "co_authors": article.co_authors,
        "institution": article.institution,
        "article_references": article.article_references,
        "doi": article.doi,
        "keywords": article.keywords,
        "category": article.category,
        "reading_time": article.reading_time,
        "show_contact_button": article.show_contact_button,
        "contact_button_text": article.contact_button_text,
        "contact_button_url": article.contact_button_url,
        "is_featured": article.is_featured,
        "published_at": iso(article.published_at),
    }

    if admin:
        base["is_published"] = article.is_published

    return base
