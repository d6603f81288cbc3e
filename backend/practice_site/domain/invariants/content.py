from sqlalchemy import Boolean, Integer, inspect
from practice_site.models.custom_code import CODE_LOCATIONS
from practice_site.models.support_message import MESSAGE_TYPES
from .exceptions import InvariantViolation
from .ordering import assert_order_value


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def assert_required(entity, fields):
    missing = [field for field in fields if _is_blank(getattr(entity, field, None))]
    if missing:
        raise InvariantViolation(f"Missing required fields: {', '.join(missing)}")


def _insert_fills(column, entity):
    """A pending row gets its column defaults at INSERT time."""
    has_default = column.default is not None or column.server_default is not None
    return has_default and not inspect(entity).persistent


def assert_column_types(entity):
    """
    NOT NULL columns reject null, and Boolean and Integer columns only
    accept values of their own type.
    """
    for column in entity.__table__.columns:
        if column.primary_key:
            continue

        value = getattr(entity, column.key, None)
        if value is None:
            if not column.nullable and not _insert_fills(column, entity):
                raise InvariantViolation(f"{column.key} is required")
            continue

        if isinstance(column.type, Boolean) and not isinstance(value, bool):
            raise InvariantViolation(f"{column.key} must be true or false")

        if isinstance(column.type, Integer) and (isinstance(value, bool) or not isinstance(value, int)):
            raise InvariantViolation(f"{column.key} must be an integer")


def assert_testimonial(testimonial):
    if testimonial.rating is None or not 1 <= testimonial.rating <= 5:
        raise InvariantViolation("rating must be between 1 and 5")


def assert_custom_code(code):
    if code.location not in CODE_LOCATIONS:
        raise InvariantViolation(
            f"location must be one of {', '.join(CODE_LOCATIONS)}"
        )


def assert_support_message(message):
    assert_required(message, ("message",))
    assert_column_types(message)
    if message.type not in MESSAGE_TYPES:
        raise InvariantViolation(f"type must be one of {', '.join(MESSAGE_TYPES)}")


ENTITY_INVARIANTS = {
    "testimonial": assert_testimonial,
    "custom_code": assert_custom_code,
}


def assert_item(item):
    """Invariants for any ordered collection row."""
    assert_required(item, item.REQUIRED_FIELDS)
    assert_order_value(item.order)
    assert_column_types(item)

    check = ENTITY_INVARIANTS.get(item.ENTITY_TYPE)
    if check:
        check(item)
