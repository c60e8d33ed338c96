"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define contracts without implementation details,
so an in-memory store and a future persistent store are interchangeable.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from .entities import Appointment, User


class IUserReader(ABC):
    """Interface for user read operations.

    Lookups return soft-deleted users too; filtering for active users is
    the caller's concern.
    """

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    def get_all(self) -> List[User]:
        """Get every user in insertion order."""
        pass


class IUserWriter(ABC):
    """Interface for user write operations."""

    @abstractmethod
    def create(self, user: User) -> User:
        """Store a new user."""
        pass

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Soft-delete a user. Returns False when the id is unknown."""
        pass


class IUserRepository(IUserReader, IUserWriter):
    """Complete user repository interface combining read/write operations."""

    pass


class IAppointmentReader(ABC):
    """Interface for appointment read operations."""

    @abstractmethod
    def find_overlapping(
        self, starts_at: datetime, ends_at: datetime
    ) -> Optional[Appointment]:
        """Get the first appointment overlapping [starts_at, ends_at]."""
        pass

    @abstractmethod
    def get_all(self) -> List[Appointment]:
        """Get every appointment in insertion order."""
        pass


class IAppointmentWriter(ABC):
    """Interface for appointment write operations."""

    @abstractmethod
    def create(self, appointment: Appointment) -> Appointment:
        """Store a new appointment."""
        pass


class IAppointmentRepository(IAppointmentReader, IAppointmentWriter):
    """Complete appointment repository interface."""

    pass
