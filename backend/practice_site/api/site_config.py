from flask import jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.site_config import (
    delete_config,
    list_configs,
    maintenance_status,
    set_config,
)
from practice_site.normalizers.settings import normalize_site_config
from practice_site.utils.request_info import json_object
from practice_site.utils.decorators import roles_required
from . import api_bp


@api_bp.route("/config", methods=["GET"])
def public_config():
    return jsonify([normalize_site_config(config) for config in list_configs()])


@api_bp.route("/maintenance-check", methods=["GET"])
def maintenance_check():
    return jsonify(maintenance_status())


@api_bp.route("/admin/config", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_list_config():
    return jsonify([normalize_site_config(config) for config in list_configs()])


@api_bp.route("/admin/config", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_set_config():
    data = json_object()
    config = set_config(data.get("key"), data.get("value"))
    return jsonify(normalize_site_config(config)), 200


@api_bp.route("/admin/config/<key>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def admin_delete_config(key):
    delete_config(key)
    return jsonify({"success": True}), 200
