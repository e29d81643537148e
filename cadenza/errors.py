"""JSON error responses for the whole API."""
import logging

from flask import jsonify, request
from flask_babel import gettext as _
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, StatementError
from werkzeug.exceptions import HTTPException

from cadenza.extensions import db

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """A payload value a model refuses to store."""


def json_object():
    """The request body when it is a JSON object, otherwise an empty dict."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message, status_code):
    response = jsonify({'success': False, 'message': message})
    response.status_code = status_code
    return response


def register_error_handlers(app):
    """Map every failure onto 400/401/403/404/500 with a `{success, message}` body."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.description, error.code)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        logger.warning("Rejected write: %s", error.orig)
        return error_response(_('Invalid or duplicate data'), 400)

    @app.errorhandler(StatementError)
    @app.errorhandler(DataError)
    def handle_statement_error(error):
        # A value the column type cannot bind, e.g. "yes" for a Boolean
        db.session.rollback()
        logger.warning("Rejected value: %s", error.orig)
        return error_response(_('Invalid data'), 400)

    @app.errorhandler(DBAPIError)
    def handle_database_error(error):
        db.session.rollback()
        logger.exception("Database error")
        return error_response(_('Server error'), 500)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        db.session.rollback()
        return error_response(str(error), 400)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception("Unhandled error")
        return error_response(_('Server error'), 500)
