"""
Appointment controller.

Handles only HTTP concerns for appointments; overlap and date rules live
in AppointmentService and the Appointment entity.
"""

from flask import Blueprint, current_app

from ..core.api_utils import get_json_body, json_response
from ..schemas.dtos import AppointmentCreateRequest, AppointmentResponse
from ..services.appointment_service import AppointmentService

appointment_bp = Blueprint("appointments", __name__, url_prefix="/appointments")


def _appointment_service() -> AppointmentService:
    return current_app.extensions["agenda.appointment_service"]


@appointment_bp.route("", methods=["POST"])
def create_appointment():
    """Create an appointment from ``{"customer", "startsAt", "endsAt"}`` (ISO-8601)."""
    data = get_json_body()
    appointment = _appointment_service().execute(
        AppointmentCreateRequest.from_payload(data)
    )

    return json_response(
        {
            "message": "Appointment created",
            "appointment": AppointmentResponse.from_domain(appointment).to_dict(),
        },
        201,
    )


@appointment_bp.route("", methods=["GET"])
def list_appointments():
    """List every appointment in creation order."""
    appointments = _appointment_service().get_all()
    return json_response(
        {
            "appointments": [
                AppointmentResponse.from_domain(appointment).to_dict()
                for appointment in appointments
            ]
        }
    )
