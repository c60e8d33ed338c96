"""
Index controller - root and health endpoints.
"""

from flask import Blueprint, current_app

from ..core.api_utils import json_response

index_bp = Blueprint("index", __name__)


@index_bp.route("/", methods=["GET"])
def index():
    """Welcome message for the API root."""
    return json_response({"message": "Welcome to the Agenda API"})


@index_bp.route("/health", methods=["GET"])
def health_check():
    """Liveness probe with store sizes for monitoring."""
    users = current_app.extensions["agenda.user_service"].get_all()
    appointments = current_app.extensions["agenda.appointment_service"].get_all()
    return json_response(
        {
            "status": "healthy",
            "users": len(users),
            "appointments": len(appointments),
        }
    )
