from typing import Any
from flask import abort
from practice_site.extensions import db
from practice_site.models.site_config import SiteConfig
from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.utils.audit import log_action
from practice_site.utils.transaction import transactional


def list_configs():
    return SiteConfig.query.order_by(SiteConfig.key.asc()).all()


def get_config(key: str):
    return SiteConfig.query.filter_by(key=key).first()


def get_config_value(key: str, default: Any = None) -> Any:
    config = get_config(key)
    return config.value if config is not None and config.value is not None else default


def get_config_values(*keys: str) -> dict[str, Any]:
    rows = SiteConfig.query.filter(SiteConfig.key.in_(keys)).all()
    return {row.key: row.value for row in rows}


def set_config(key: str, value: Any):
    """Insert or replace a config entry; the audit payload keeps old and new values."""
    if not isinstance(key, str) or not key.strip():
        raise InvariantViolation("key is required")
    if value is None:
        raise InvariantViolation("value is required")

    key = key.strip()

    with transactional():
        config = get_config(key)
        old_value = config.value if config is not None else None

        if config is None:
            config = SiteConfig(key=key, value=value)
            db.session.add(config)
        else:
            config.value = value

        db.session.flush()

        log_action(
            action="site_config.set",
            entity_type="site_config",
            entity_id=key,
            payload={"old": old_value, "new": value},
        )

    return config


def delete_config(key: str):
    config = get_config(key)
    if config is None:
        abort(404, description="Config key not found")

    with transactional():
        old_value = config.value
        db.session.delete(config)

        log_action(
            action="site_config.delete",
            entity_type="site_config",
            entity_id=key,
            payload={"old": old_value},
        )


def maintenance_status():
    """Public maintenance flag plus the general info the maintenance page shows."""
    values = get_config_values("maintenance_mode", "general_info")
    maintenance = values.get("maintenance_mode") or {}
    if not isinstance(maintenance, dict):
        maintenance = {"isEnabled": bool(maintenance)}

    return {
        "maintenance": {**maintenance, "enabled": bool(maintenance.get("isEnabled", False))},
        "general": values.get("general_info") or {},
    }
