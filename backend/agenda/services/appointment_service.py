"""
Appointment service: creates appointments that never overlap.
"""

import logging
import threading
from typing import List

from ..core.exceptions import ConflictError
from ..domain.entities import Appointment
from ..domain.interfaces import IAppointmentRepository
from ..schemas.dtos import AppointmentCreateRequest, ensure_aware

logger = logging.getLogger(__name__)


class AppointmentService:
    """Application service for appointment-related use-cases.

    Depends on IAppointmentRepository so the in-memory store can be swapped
    for a persistent one without touching the business rules.
    """

    def __init__(self, appointment_repo: IAppointmentRepository):
        self.appointment_repo = appointment_repo
        self._lock = threading.Lock()

    def execute(self, request: AppointmentCreateRequest) -> Appointment:
        """Create a new appointment with business rule validation.

        Business Rules:
        - No overlap with any stored appointment; intervals are closed, so
          back-to-back appointments sharing a boundary instant conflict
        - Start must be in the future and end after start (entity rules)
        - Naive datetimes are read in the application timezone
        """
        starts_at = ensure_aware(request.starts_at)
        ends_at = ensure_aware(request.ends_at)

        with self._lock:
            overlapping = self.appointment_repo.find_overlapping(starts_at, ends_at)
            if overlapping is not None:
                logger.info(
                    "Rejected appointment: overlapping time range",
                    extra={
                        "context": {
                            "starts_at": starts_at,
                            "ends_at": ends_at,
                        }
                    },
                )
                raise ConflictError("Appointment overlaps with another appointment")

            appointment = Appointment(
                customer=request.customer,
                starts_at=starts_at,
                ends_at=ends_at,
            )
            self.appointment_repo.create(appointment)

        logger.info(
            "Appointment created",
            extra={"context": {"starts_at": appointment.starts_at}},
        )
        return appointment

    def get_all(self) -> List[Appointment]:
        """Get all appointments in creation order."""
        return self.appointment_repo.get_all()
