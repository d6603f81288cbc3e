from typing import Any, Dict
from flask import abort
from practice_site.extensions import db
from practice_site.domain.invariants.content import assert_item
from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.domain.invariants.ordering import parse_reorder_payload
from practice_site.utils.audit import log_action
from practice_site.utils.optimistic_lock import enforce_optimistic_lock
from practice_site.utils.order import compact_order, next_order
from practice_site.utils.transaction import transactional


def list_items(model, *, active_only: bool = False, query=None):
    query = query if query is not None else model.query

    if active_only:
        query = query.filter(model.is_active.is_(True))

    return query.order_by(model.order.asc(), model.created_at.asc()).all()


def get_item(model, item_id):
    item = db.session.get(model, item_id)
    if item is None:
        abort(404, description=f"{model.ENTITY_TYPE} not found")
    return item


def _payload_dict(data):
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object")
    return data


def _apply_column_defaults(item):
    """Fill scalar column defaults now so invariants see them before INSERT."""
    for column in item.__table__.columns:
        default = column.default
        if default is not None and default.is_scalar and getattr(item, column.key) is None:
            setattr(item, column.key, default.arg)


def create_item(model, data: Dict[str, Any]):
    """
    Create a row in an ordered collection.

    New rows are appended (order = max + 1, or 0 for the first row)
    unless the payload carries an explicit order.
    """
    data = _payload_dict(data)
    item = model()

    for field in model.EDITABLE_FIELDS:
        if field in data:
            setattr(item, field, data[field])

    with transactional():
        item.order = data["order"] if "order" in data else next_order(model)
        _apply_column_defaults(item)

        assert_item(item)

        db.session.add(item)
        db.session.flush()

        log_action(
            action=f"{model.ENTITY_TYPE}.create",
            entity_type=model.ENTITY_TYPE,
            entity_id=item.id,
            payload={"fields": sorted(field for field in data if field in model.EDITABLE_FIELDS)},
        )

    return item


def update_item(model, item_id, data: Dict[str, Any]):
    """Apply whitelisted fields present in the payload; others are left alone."""
    data = _payload_dict(data)
    item = get_item(model, item_id)
    enforce_optimistic_lock(item)

    changed_fields: list[str] = []

    with transactional():
        for field in (*model.EDITABLE_FIELDS, "order"):
            if field in data and getattr(item, field) != data[field]:
                setattr(item, field, data[field])
                changed_fields.append(field)

        if changed_fields:
            assert_item(item)

            log_action(
                action=f"{model.ENTITY_TYPE}.update",
                entity_type=model.ENTITY_TYPE,
                entity_id=item.id,
                payload={"fields": changed_fields},
            )

    return item


def delete_item(model, item_id):
    item = get_item(model, item_id)

    with transactional():
        db.session.delete(item)
        db.session.flush()

        compact_order(model)

        log_action(
            action=f"{model.ENTITY_TYPE}.delete",
            entity_type=model.ENTITY_TYPE,
            entity_id=item_id,
        )


def reorder_items(model, payload):
    """
    Apply a batch of {id, order} pairs in one transaction.

    Ids outside the collection are ignored. Returns the full list in the
    new order.
    """
    entries = parse_reorder_payload(payload)
    ids = {entry["id"] for entry in entries}

    with transactional():
        rows = {row.id: row for row in model.query.filter(model.id.in_(ids)).all()}

        applied = []
        for entry in entries:
            row = rows.get(entry["id"])
            if row is None:
                continue
            row.order = entry["order"]
            applied.append(entry)

        log_action(
            action=f"{model.ENTITY_TYPE}.reorder",
            entity_type=model.ENTITY_TYPE,
            entity_id=None,
            payload={"items": applied, "ignored": len(entries) - len(applied)},
        )

    return list_items(model)
