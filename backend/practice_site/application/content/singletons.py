import copy
from typing import Any, Dict
from practice_site.extensions import db
from practice_site.domain.defaults import SINGLETON_DEFAULTS
from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.domain.invariants.settings import assert_settings
from practice_site.models.base import utc_now
from practice_site.utils.audit import log_action
from practice_site.utils.optimistic_lock import enforce_optimistic_lock
from practice_site.utils.transaction import transactional


def _defaults(model):
    return copy.deepcopy(SINGLETON_DEFAULTS[model.ENTITY_TYPE])


def get_singleton(model):
    """
    Return the settings row, creating it from defaults on first read.
    Blocks added after the row was created are backfilled.
    """
    row = model.query.order_by(model.created_at.asc()).first()
    defaults = _defaults(model)

    if row is None:
        row = model(**defaults)
        with transactional():
            db.session.add(row)
        return row

    missing = [key for key in defaults if getattr(row, key) is None]
    if missing:
        with transactional():
            for key in missing:
                setattr(row, key, defaults[key])

    return row


def update_singleton(model, data: Dict[str, Any]):
    """Shallow merge: submitted top-level keys replace stored ones."""
    if not isinstance(data, dict):
        raise InvariantViolation("Request body must be a JSON object")

    row = get_singleton(model)
    enforce_optimistic_lock(row)

    changed_fields: list[str] = []

    with transactional():
        for field in model.EDITABLE_FIELDS:
            if field in data and getattr(row, field) != data[field]:
                setattr(row, field, data[field])
                changed_fields.append(field)

        if changed_fields:
            assert_settings(row)

            if hasattr(row, "last_updated"):
                row.last_updated = utc_now()

            log_action(
                action=f"{model.ENTITY_TYPE}.update",
                entity_type=model.ENTITY_TYPE,
                entity_id=row.id,
                payload={"fields": changed_fields},
            )

    return row


def reset_singleton(model):
    """Drop the stored row; the next read recreates it from defaults."""
    with transactional():
        deleted = model.query.delete()

        log_action(
            action=f"{model.ENTITY_TYPE}.reset",
            entity_type=model.ENTITY_TYPE,
            entity_id=None,
            payload={"deleted_rows": deleted},
        )

    return get_singleton(model)
