"""
Domain entities - Pure business logic, no framework dependencies.

Entities validate their invariants once, at construction, and raise
``ValidationError`` with the exact message shown to API clients.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..core.config import now
from ..core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_NAME_LENGTH = 3


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


@dataclass(frozen=True)
class User:
    """Domain entity representing a User in the system.

    Every field is read-only after construction except ``deleted_at``,
    which only changes through ``mark_deleted`` (soft delete). Users are
    never removed from storage.
    """

    id: int
    name: str
    email: str
    created_at: datetime = field(default_factory=now)
    deleted_at: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self):
        """Validate domain rules. Name checks run before email checks."""
        if _is_blank(self.name):
            raise ValidationError("Name cannot be empty!")
        if len("".join(self.name.split())) < MIN_NAME_LENGTH:
            raise ValidationError("Name must contain at least 3 characters")
        if _is_blank(self.email):
            raise ValidationError("Email is required")
        if not EMAIL_PATTERN.fullmatch(self.email):
            raise ValidationError("Invalid email")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    def mark_deleted(self, when: Optional[datetime] = None) -> None:
        """Soft-delete the user by stamping ``deleted_at``."""
        object.__setattr__(self, "deleted_at", when or now())


@dataclass(frozen=True)
class Appointment:
    """Domain entity for Appointment business logic."""

    customer: str
    starts_at: datetime
    ends_at: datetime

    def __post_init__(self):
        """Validate business rules."""
        # Compare against "now" with the same awareness as starts_at
        current = datetime.now(self.starts_at.tzinfo)
        if self.starts_at <= current:
            raise ValidationError("Start date cannot be before now")
        if self.ends_at <= self.starts_at:
            raise ValidationError("End date cannot be before start date")

    def overlaps(self, starts_at: datetime, ends_at: datetime) -> bool:
        """Closed-interval overlap: touching boundaries count as overlapping."""
        return self.starts_at <= ends_at and starts_at <= self.ends_at
