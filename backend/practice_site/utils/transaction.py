import logging
from contextlib import contextmanager
from practice_site.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """Commit the block's changes together, or roll all of them back."""
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        logger.debug("Transaction rolled back: %r", exc)
        raise
