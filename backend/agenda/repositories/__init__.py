from .appointment_repo import InMemoryAppointmentRepository
from .user_repo import InMemoryUserRepository

__all__ = ["InMemoryAppointmentRepository", "InMemoryUserRepository"]
