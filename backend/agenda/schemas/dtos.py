"""
Data Transfer Objects (DTOs) exchanged between controllers and services.

Request DTOs carry raw client input into the service layer; entity
construction performs the business validation. Response DTOs shape
domain entities into the JSON bodies returned by the API.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..core import config
from ..core.exceptions import ValidationError


def parse_datetime(value: Any) -> datetime:
    """Parse an ISO-8601 string into an aware datetime.

    Naive values are interpreted in the application timezone so that every
    stored datetime can be compared with every other one.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError("Invalid date") from None
    else:
        raise ValidationError("Invalid date")

    return ensure_aware(parsed)


def ensure_aware(value: datetime) -> datetime:
    """Attach the application timezone to a naive datetime."""
    if value.tzinfo is None:
        return value.replace(tzinfo=config.APP_TZ)
    return value


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class UserCreateRequest:
    """DTO for user creation requests."""

    name: Any
    email: Any

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "UserCreateRequest":
        return cls(name=data.get("name"), email=data.get("email"))


@dataclass
class UserResponse:
    """DTO for user API responses."""

    id: int
    name: str
    email: str
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user) -> "UserResponse":
        """Create response from domain entity."""
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            deleted_at=user.deleted_at,
        )

    def to_dict(self, include_deleted: bool = False) -> Dict[str, Any]:
        """Public representation; ``deletedAt`` only appears when requested and set."""
        data: Dict[str, Any] = {"id": self.id, "name": self.name, "email": self.email}
        if include_deleted and self.deleted_at is not None:
            data["deletedAt"] = format_datetime(self.deleted_at)
        return data

    def to_summary(self) -> Dict[str, Any]:
        """Short representation returned right after creation."""
        return {"name": self.name, "email": self.email}


@dataclass
class AppointmentCreateRequest:
    """DTO for appointment creation requests."""

    customer: Any
    starts_at: datetime
    ends_at: datetime

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "AppointmentCreateRequest":
        """Build a request from a JSON body with ISO-8601 ``startsAt``/``endsAt``."""
        return cls(
            customer=data.get("customer"),
            starts_at=parse_datetime(data.get("startsAt")),
            ends_at=parse_datetime(data.get("endsAt")),
        )


@dataclass
class AppointmentResponse:
    """DTO for appointment API responses."""

    customer: str
    starts_at: datetime
    ends_at: datetime

    @classmethod
    def from_domain(cls, appointment) -> "AppointmentResponse":
        """Create response from domain entity."""
        return cls(
            customer=appointment.customer,
            starts_at=appointment.starts_at,
            ends_at=appointment.ends_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customer": self.customer,
            "startsAt": format_datetime(self.starts_at),
            "endsAt": format_datetime(self.ends_at),
        }
