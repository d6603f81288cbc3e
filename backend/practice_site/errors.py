from flask import jsonify
from werkzeug.exceptions import HTTPException
from practice_site.domain.invariants.exceptions import InvariantViolation


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": str(error),
            "type": "InvariantViolation",
        })
        response.status_code = 400
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.description or error.name,
        })
        response.status_code = error.code
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_exception(error):
        app.logger.exception("Unhandled error: %s", error)
        response = jsonify({
            "error": "Internal server error",
        })
        response.status_code = 500
        return response
