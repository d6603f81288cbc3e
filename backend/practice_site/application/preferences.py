import json
from practice_site.extensions import db
from practice_site.models.user_preference import UserPreference
from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.utils.transaction import transactional


def get_preference(key):
    return UserPreference.query.filter_by(key=key).first_or_404()


def set_preference(key, value):
    if not isinstance(key, str) or not key.strip():
        raise InvariantViolation("key is required")
    if value is None:
        raise InvariantViolation("value is required")

    stored = value if isinstance(value, str) else json.dumps(value)

    with transactional():
        preference = UserPreference.query.filter_by(key=key).first()
        if preference is None:
            preference = UserPreference(key=key, value=stored)
            db.session.add(preference)
        else:
            preference.value = stored

    return preference
