from .content import assert_column_types, assert_required
from .exceptions import InvariantViolation


def assert_settings(row):
    """JSON columns keep their container shape; required text stays non-empty."""
    for field in row.JSON_LIST_FIELDS:
        if not isinstance(getattr(row, field), list):
            raise InvariantViolation(f"{field} must be a list")

    for field in row.JSON_OBJECT_FIELDS:
        value = getattr(row, field)
        if value is not None and not isinstance(value, dict):
            raise InvariantViolation(f"{field} must be an object")

    assert_required(row, row.REQUIRED_FIELDS)
    assert_column_types(row)
