from sqlalchemy import func
from practice_site.extensions import db


def next_order(model):
    """Order value for a new row appended to the end of the collection."""
    max_order = db.session.query(func.max(model.order)).scalar()
    return 0 if max_order is None else max_order + 1


def compact_order(model, query=None):
    """
    Re-assigns sequential order values (0..N-1), keeping the current
    relative order of the rows.
    """
    query = query if query is not None else model.query
    items = query.order_by(model.order.asc(), model.created_at.asc()).all()

    for index, item in enumerate(items):
        if item.order != index:
            item.order = index

    db.session.flush()
