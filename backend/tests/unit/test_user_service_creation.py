"""
Unit tests for UserService user creation functionality.

This module tests user creation operations:
- Successful creation with sequential ids
- Duplicate email rejection among active users
- Re-registration of an email freed by a soft delete
- Entity validation errors surfacing unchanged
"""

from unittest.mock import Mock

import pytest

from agenda.core.exceptions import ConflictError, ValidationError
from agenda.domain.entities import User
from agenda.schemas.dtos import UserCreateRequest
from agenda.services.user_service import UserService
from tests.factories.repository_factories import UserRepositoryFactory
from tests.fixtures.domain_fixtures import make_user


@pytest.fixture
def mock_repo() -> Mock:
    """Create a mock user repository implementing the interface."""
    return UserRepositoryFactory.create_mock_full()


@pytest.mark.user
class TestUserServiceCreation:
    """Test user creation against a real in-memory repository."""

    def test_create_user(self, user_service):
        user = user_service.execute(
            UserCreateRequest(name="John Doe", email="johndoe@example.com")
        )

        assert isinstance(user, User)
        assert user.id == 1
        assert user.name == "John Doe"
        assert user.email == "johndoe@example.com"
        assert user.deleted_at is None

    def test_created_user_is_stored(self, user_service, user_repo):
        user = user_service.execute(
            UserCreateRequest(name="John Doe", email="johndoe@example.com")
        )

        assert user_repo.find_by_id(user.id) is user

    def test_duplicate_email_is_rejected(self, user_service, user_repo):
        user_service.execute(
            UserCreateRequest(name="John Doe", email="johndoe@example.com")
        )

        with pytest.raises(
            ConflictError, match="^There is already an user with this email$"
        ):
            user_service.execute(
                UserCreateRequest(name="Johnny", email="johndoe@example.com")
            )

        assert len(user_repo.get_all()) == 1

    def test_ids_are_sequential(self, user_service):
        first = user_service.execute(
            UserCreateRequest(name="John Doe", email="john@example.com")
        )
        second = user_service.execute(
            UserCreateRequest(name="Jane Doe", email="jane@example.com")
        )

        assert (first.id, second.id) == (1, 2)

    def test_ids_are_not_reused_after_deletion(self, user_service):
        user_service.execute(UserCreateRequest(name="John Doe", email="john@example.com"))
        user_service.execute(UserCreateRequest(name="Jane Doe", email="jane@example.com"))
        user_service.delete(1)

        third = user_service.execute(
            UserCreateRequest(name="Jack Doe", email="jack@example.com")
        )

        assert third.id == 3

    def test_deleted_email_can_be_registered_again(self, user_service):
        user_service.execute(UserCreateRequest(name="John Doe", email="john@example.com"))
        user_service.delete(1)

        again = user_service.execute(
            UserCreateRequest(name="John Doe", email="john@example.com")
        )

        assert again.id == 2
        assert again.is_active
        assert user_service.find_by_email("john@example.com") is again

    def test_invalid_name_is_rejected_without_storing(self, user_service, user_repo):
        with pytest.raises(ValidationError, match="Name must contain at least 3 characters"):
            user_service.execute(UserCreateRequest(name="Jo", email="jo@example.com"))

        assert user_repo.get_all() == []

    def test_invalid_email_is_rejected(self, user_service):
        with pytest.raises(ValidationError, match="^Invalid email$"):
            user_service.execute(UserCreateRequest(name="John Doe", email="john"))


@pytest.mark.user
class TestUserServiceCreationWithMocks:
    """Test the repository calls made during creation."""

    def test_create_calls_repository(self, mock_repo):
        service = UserService(mock_repo)

        user = service.execute(UserCreateRequest(name="John Doe", email="john@example.com"))

        mock_repo.find_by_email.assert_called_once_with("john@example.com")
        mock_repo.create.assert_called_once_with(user)

    def test_duplicate_skips_create(self, mock_repo):
        mock_repo.find_by_email.return_value = make_user(1, email="john@example.com")
        service = UserService(mock_repo)

        with pytest.raises(ConflictError):
            service.execute(UserCreateRequest(name="John Doe", email="john@example.com"))

        mock_repo.create.assert_not_called()

    def test_next_id_follows_highest_stored_id(self):
        mock_repo = UserRepositoryFactory.create_populated_mock(
            [make_user(4, email="a@example.com"), make_user(7, email="b@example.com")]
        )
        service = UserService(mock_repo)

        user = service.execute(UserCreateRequest(name="John Doe", email="c@example.com"))

        assert user.id == 8
