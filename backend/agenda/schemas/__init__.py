"""Request and response DTOs shared by controllers and services."""

from .dtos import (
    AppointmentCreateRequest,
    AppointmentResponse,
    UserCreateRequest,
    UserResponse,
)

__all__ = [
    "AppointmentCreateRequest",
    "AppointmentResponse",
    "UserCreateRequest",
    "UserResponse",
]
