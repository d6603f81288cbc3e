class SingletonMixin:
    """
    Marker for one-row settings tables.

    The row is created lazily with defaults on first read; updates are a
    shallow merge of EDITABLE_FIELDS present in the payload.
    """
    ENTITY_TYPE = ""
    EDITABLE_FIELDS = ()
    REQUIRED_FIELDS = ()
    JSON_LIST_FIELDS = ()
    JSON_OBJECT_FIELDS = ()
