import logging
import threading
from typing import List, Optional

from ..core.config import now
from ..core.exceptions import ConflictError, NotFoundError
from ..domain.entities import User
from ..domain.interfaces import IUserRepository
from ..schemas.dtos import UserCreateRequest

logger = logging.getLogger(__name__)


class UserService:
    """Application service for user-related use-cases.

    This service:
    - Keeps business rules (email uniqueness, id sequencing, soft-delete
      transitions) out of controllers and repositories
    - Depends on IUserRepository, not on a concrete store
    - Returns lookups unfiltered; hiding soft-deleted users is an HTTP concern
    """

    def __init__(self, repo: IUserRepository) -> None:
        self.repo = repo
        self._lock = threading.Lock()

    def execute(self, request: UserCreateRequest) -> User:
        """Create a user.

        Business Rules:
        - No other active user may hold the same email
        - Ids are sequential and never reused, even after deletion
        - Name and email validation happens in the User entity
        """
        with self._lock:
            existing = self.repo.find_by_email(request.email)
            if existing is not None and existing.is_active:
                logger.info(
                    "Rejected user creation: duplicate email",
                    extra={"context": {"existing_user_id": existing.id}},
                )
                raise ConflictError("There is already an user with this email")

            user = User(
                id=self._next_id(),
                name=request.name,
                email=request.email,
                created_at=now(),
            )
            self.repo.create(user)

        logger.info("User created", extra={"context": {"user_id": user.id}})
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID - simple delegation to repository."""
        return self.repo.find_by_id(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email - simple delegation to repository."""
        return self.repo.find_by_email(email)

    def get_all(self) -> List[User]:
        """Get every user, soft-deleted ones included."""
        return self.repo.get_all()

    def delete(self, user_id: int) -> None:
        """Soft-delete a user (business rule: never hard-remove)."""
        with self._lock:
            user = self.repo.find_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")
            if user.is_deleted:
                raise ConflictError("User already deleted")
            self.repo.delete(user_id)

        logger.info("User soft-deleted", extra={"context": {"user_id": user_id}})

    def _next_id(self) -> int:
        ids = [user.id for user in self.repo.get_all()]
        return max(ids) + 1 if ids else 1
