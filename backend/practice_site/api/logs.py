from datetime import datetime, timezone
from flask import Response, request, jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.audit_logs import available_months, list_logs
from practice_site.normalizers.audit import normalize_audit_log
from practice_site.normalizers.pagination import normalize_pagination
from practice_site.services.log_reporter import generate_summary_report, generate_text_report
from practice_site.utils.audit import log_access
from practice_site.utils.decorators import log_password_required, roles_required
from practice_site.utils.pagination import month_bounds, parse_limit
from . import api_bp


def _current_month():
    return datetime.now(timezone.utc).strftime("%Y-%m")


def _list_category(category):
    month = request.args.get("month")
    log_access(action=f"logs.view_{category}", payload={"month": month})

    items, meta = list_logs(
        category=category,
        month=month,
        cursor=request.args.get("cursor"),
        limit=parse_limit(request.args.get("limit")),
    )

    return jsonify(
        normalize_pagination(items, normalize_audit_log, cursor=meta, months=available_months())
    )


@api_bp.route("/admin/logs/changes", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_change_logs():
    return _list_category("change")


@api_bp.route("/admin/logs/access", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_access_logs():
    return _list_category("access")


# ------------------------
# Password-protected text reports
# ------------------------

def _text_response(text, filename=None):
    response = Response(text, mimetype="text/plain")
    response.headers["Content-Type"] = "text/plain; charset=utf-8"
    if filename:
        response.headers["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


@api_bp.route("/admin/logs/test", methods=["GET"])
@log_password_required
def logs_test():
    return jsonify({"success": True, "months": available_months()})


@api_bp.route("/admin/logs/view", methods=["GET"])
@api_bp.route("/admin/logs/view/<month>", methods=["GET"])
@log_password_required
def logs_view(month=None):
    month = month or _current_month()
    month_bounds(month)
    log_access(action="logs.view_report", payload={"month": month})
    return _text_response(generate_text_report(month))


@api_bp.route("/admin/logs/report", methods=["GET"])
@api_bp.route("/admin/logs/report/<month>", methods=["GET"])
@log_password_required
def logs_report(month=None):
    month = month or _current_month()
    month_bounds(month)
    log_access(action="logs.download_report", payload={"month": month})
    return _text_response(generate_text_report(month), f"admin-report-{month}.txt")


@api_bp.route("/admin/logs/summary", methods=["GET"])
@log_password_required
def logs_summary():
    log_access(action="logs.download_summary")
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    return _text_response(generate_summary_report(), f"admin-summary-{stamp}.txt")
