import threading
from typing import List, Optional

from ..core.config import now
from ..domain.entities import User
from ..domain.interfaces import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """Repository for User storage kept in process memory.

    This implementation:
    - Implements IUserRepository interface (Dependency Inversion)
    - Handles data access only; uniqueness and deletion rules live in
      UserService
    - Keeps users in insertion order, which is also id order
    """

    def __init__(self) -> None:
        self.items: List[User] = []
        self._lock = threading.Lock()

    def create(self, user: User) -> User:
        """Append a user to the store."""
        with self._lock:
            self.items.append(user)
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID, including soft-deleted users."""
        for user in self.items:
            if user.id == user_id:
                return user
        return None

    def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email, including soft-deleted users.

        When an email was re-registered after a soft delete, the active
        user wins; otherwise the most recently created match is returned.
        """
        match: Optional[User] = None
        for user in self.items:
            if user.email != email:
                continue
            if user.is_active:
                return user
            match = user
        return match

    def get_all(self) -> List[User]:
        """Get all users, including soft-deleted ones, in insertion order."""
        return list(self.items)

    def delete(self, user_id: int) -> bool:
        """Stamp ``deleted_at`` on the user. Returns False if not found."""
        with self._lock:
            user = self.find_by_id(user_id)
            if user is None:
                return False
            user.mark_deleted(now())
            return True
