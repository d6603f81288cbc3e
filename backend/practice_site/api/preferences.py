from flask import jsonify
from practice_site.application.preferences import get_preference, set_preference
from practice_site.normalizers.messages import normalize_preference
from practice_site.utils.request_info import json_object
from . import api_bp


@api_bp.route("/user-preference/<key>", methods=["GET"])
def get_user_preference(key):
    return jsonify(normalize_preference(get_preference(key)))


@api_bp.route("/user-preference", methods=["POST"])
def set_user_preference():
    data = json_object()
    return jsonify(normalize_preference(set_preference(data.get("key"), data.get("value"))))
