def iso(value):
    return value.isoformat() if value is not None else None


def normalize_ordered(item, admin=False):
    base = {
        "id": item.id,
        "order": item.order,
        "is_active": item.is_active,
    }

    if admin:
        base["created_at"] = iso(item.created_at)
        base["updated_at"] = iso(item.updated_at)

    return base
