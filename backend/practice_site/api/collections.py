"""
CRUD + reorder routes for the simple ordered collections.

Each collection gets:
  GET    /api/<path>                 active rows (public)
  GET    /api/admin/<path>           all rows
  POST   /api/admin/<path>
  PUT    /api/admin/<path>/<id>
  DELETE /api/admin/<path>/<id>
  PUT    /api/admin/<path>/reorder
"""
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.content.ordered import (
    create_item,
    delete_item,
    list_items,
    reorder_items,
    update_item,
)
from practice_site.models import FaqItem, PhotoCarouselItem, Service, Specialty, Testimonial
from practice_site.normalizers.content import (
    normalize_carousel_item,
    normalize_faq_item,
    normalize_service,
    normalize_specialty,
    normalize_testimonial,
)
from practice_site.utils.decorators import roles_required
from . import api_bp

COLLECTIONS = (
    ("testimonials", Testimonial, normalize_testimonial),
    ("faq", FaqItem, normalize_faq_item),
    ("services", Service, normalize_service),
    ("photo-carousel", PhotoCarouselItem, normalize_carousel_item),
    ("specialties", Specialty, normalize_specialty),
)


def admin_only(fn):
    return jwt_required()(roles_required("admin")(fn))


def register_collection(path, model, normalize, *, public=True):
    name = path.replace("-", "_")

    def public_list():
        return jsonify([normalize(item) for item in list_items(model, active_only=True)])

    def admin_list():
        return jsonify([normalize(item, admin=True) for item in list_items(model)])

    def admin_create():
        item = create_item(model, request.get_json(silent=True))
        return jsonify(normalize(item, admin=True)), 201

    def admin_update(item_id):
        item = update_item(model, item_id, request.get_json(silent=True))
        return jsonify(normalize(item, admin=True))

    def admin_delete(item_id):
        delete_item(model, item_id)
        return jsonify({"success": True})

    def admin_reorder():
        items = reorder_items(model, request.get_json(silent=True))
        return jsonify([normalize(item, admin=True) for item in items])

    if public:
        api_bp.add_url_rule(f"/{path}", f"list_{name}", public_list, methods=["GET"])
    api_bp.add_url_rule(f"/admin/{path}", f"admin_list_{name}", admin_only(admin_list), methods=["GET"])
    api_bp.add_url_rule(f"/admin/{path}", f"admin_create_{name}", admin_only(admin_create), methods=["POST"])
    api_bp.add_url_rule(f"/admin/{path}/reorder", f"admin_reorder_{name}", admin_only(admin_reorder), methods=["PUT"])
    api_bp.add_url_rule(f"/admin/{path}/<item_id>", f"admin_update_{name}", admin_only(admin_update), methods=["PUT"])
    api_bp.add_url_rule(f"/admin/{path}/<item_id>", f"admin_delete_{name}", admin_only(admin_delete), methods=["DELETE"])


for _path, _model, _normalize in COLLECTIONS:
    register_collection(_path, _model, _normalize)
