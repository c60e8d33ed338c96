"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities with their invariants
- interfaces.py: Repository contracts
"""

from .entities import Appointment, User
from .interfaces import (
    IAppointmentReader,
    IAppointmentRepository,
    IAppointmentWriter,
    IUserReader,
    IUserRepository,
    IUserWriter,
)

__all__ = [
    # Domain entities
    "User",
    "Appointment",
    # Repository interfaces
    "IUserRepository",
    "IAppointmentRepository",
    # Segregated interfaces
    "IUserReader",
    "IUserWriter",
    "IAppointmentReader",
    "IAppointmentWriter",
]
