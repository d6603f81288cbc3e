from practice_site.extensions import db


class OrderedMixin:
    """
    Columns shared by every admin-sortable collection.

    Subclasses declare:
    - ENTITY_TYPE: name used in audit actions ("testimonial.create")
    - REQUIRED_FIELDS: must be present and non-empty
    - EDITABLE_FIELDS: whitelisted for create/update payloads
    """
    ENTITY_TYPE = ""
    REQUIRED_FIELDS = ()
    EDITABLE_FIELDS = ()

    order = db.Column(db.Integer, nullable=False, default=0, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
