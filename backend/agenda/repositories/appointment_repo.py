"""
Appointment repository implementation backed by process memory.
"""

import threading
from datetime import datetime
from typing import List, Optional

from ..domain.entities import Appointment
from ..domain.interfaces import IAppointmentRepository


class InMemoryAppointmentRepository(IAppointmentRepository):
    """Repository for Appointment storage operations.

    Appointments are kept in insertion order; lookups are linear scans.
    """

    def __init__(self) -> None:
        self.items: List[Appointment] = []
        self._lock = threading.Lock()

    def create(self, appointment: Appointment) -> Appointment:
        """Append an appointment to the store."""
        with self._lock:
            self.items.append(appointment)
        return appointment

    def find_overlapping(
        self, starts_at: datetime, ends_at: datetime
    ) -> Optional[Appointment]:
        """Return the first stored appointment touching [starts_at, ends_at]."""
        for appointment in self.items:
            if appointment.overlaps(starts_at, ends_at):
                return appointment
        return None

    def get_all(self) -> List[Appointment]:
        """Get all appointments in insertion order."""
        return list(self.items)
