from .common import iso


def normalize_settings(row):
    """Singleton settings rows: every editable field plus timestamps."""
    data = {"id": row.id}

    for field in row.EDITABLE_FIELDS:
        data[field] = getattr(row, field)

    if hasattr(row, "last_updated"):
        data["last_updated"] = iso(row.last_updated)

    data["updated_at"] = iso(row.updated_at)
    return data


def normalize_site_config(config):
    return {
        "key": config.key,
        "value": config.value,
        "updated_at": iso(config.updated_at),
    }
