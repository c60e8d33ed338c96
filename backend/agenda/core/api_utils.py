"""
Common API utilities for consistent response formatting across all controllers.
"""

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .exceptions import AgendaError

logger = logging.getLogger(__name__)

_TRUTHY_QUERY_VALUES = ("true", "1", "yes")


class InvalidJSONError(AgendaError):
    """Raised when a request body cannot be decoded as a JSON object."""

    status_code = 400


def json_response(payload: Any, status_code: int = 200) -> tuple:
    """
    Standardized JSON response for all endpoints.

    Returns:
        Tuple of (json_response, status_code)
    """
    return jsonify(payload), status_code


def error_response(message: str, status_code: int = 400) -> tuple:
    """Error body shared by every endpoint: ``{"error": message}``."""
    return json_response({"error": message}, status_code)


def get_json_body(default: Optional[dict] = None) -> dict:
    """
    Parse the request body as a JSON object.

    An empty body yields ``default`` (or ``{}``). A body that is present but
    not a JSON object raises ``InvalidJSONError``.
    """
    if not request.get_data(cache=True):
        return {} if default is None else default

    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise InvalidJSONError("Invalid JSON")
    return data


def includes_deleted_flag() -> bool:
    """
    Read the ``includesDeleted`` flag from the JSON body or the query string.

    The body takes precedence; only a literal ``true`` enables it there.
    """
    body = get_json_body()
    if "includesDeleted" in body:
        return body["includesDeleted"] is True

    value = request.args.get("includesDeleted", "")
    return value.lower() in _TRUTHY_QUERY_VALUES


def register_error_handlers(app: Flask) -> None:
    """Map domain errors and HTTP errors to ``{"error": message}`` bodies."""

    @app.errorhandler(AgendaError)
    def handle_agenda_error(error: AgendaError):
        logger.info(
            "Request rejected",
            extra={
                "context": {
                    "error_type": type(error).__name__,
                    "error_message": error.message,
                    "path": request.path,
                }
            },
        )
        return error_response(error.message, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(error):
        return error_response("Route not found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return error_response("Method not allowed", 405)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        if isinstance(error, HTTPException):
            return error_response(error.description or error.name, error.code or 500)

        logger.error(
            "Unhandled error while processing request",
            extra={"context": {"path": request.path, "method": request.method}},
            exc_info=True,
        )
        return error_response("Unknown error", 400)
