from flask import jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from practice_site.extensions import db
from . import api_bp


@api_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:
        database = "unavailable"

    return jsonify({
        "status": "ok" if database == "ok" else "degraded",
        "service": "practice-site",
        "database": database,
    })
