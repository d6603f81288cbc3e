from typing import Set
from practice_site.domain.invariants.exceptions import InvariantViolation

ALLOWED_ARTICLE_TRANSITIONS: dict[str, Set[str]] = {
    "draft": {"published"},
    "published": {"draft"},
}


def article_status(article) -> str:
    return "published" if article.is_published else "draft"


def assert_article_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards article publish state. Re-applying the current state is a no-op
    and is accepted.
    """
    if from_status == to_status:
        return

    allowed = ALLOWED_ARTICLE_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise InvariantViolation(
            f"Illegal article transition: {from_status} -> {to_status}"
        )
