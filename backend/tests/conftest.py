"""
Central pytest configuration for the Agenda API tests.

This file provides common fixtures, test markers, and setup
for both unit and integration tests.
"""

import os

import pytest

# Set before importing the application so .env files are ignored
os.environ["TESTING"] = "true"

from agenda.core.config import Settings  # noqa: E402
from agenda.main import create_app  # noqa: E402
from agenda.repositories.appointment_repo import (  # noqa: E402
    InMemoryAppointmentRepository,
)
from agenda.repositories.user_repo import InMemoryUserRepository  # noqa: E402
from agenda.services.appointment_service import AppointmentService  # noqa: E402
from agenda.services.user_service import UserService  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "controllers: mark test as controller-related")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "domain: mark test as domain entity test")
    config.addinivalue_line("markers", "appointment: mark test as appointment-related")
    config.addinivalue_line("markers", "user: mark test as user-related")
    config.addinivalue_line("markers", "logging: mark test as logging-related")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        path = str(item.path)

        if "unit" in path:
            item.add_marker(pytest.mark.unit)

        if "integration" in path:
            item.add_marker(pytest.mark.integration)

        if "controller" in path:
            item.add_marker(pytest.mark.controllers)

        if "service" in path:
            item.add_marker(pytest.mark.services)

        if "repo" in path:
            item.add_marker(pytest.mark.repositories)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    """Empty in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def appointment_repo() -> InMemoryAppointmentRepository:
    """Empty in-memory appointment repository."""
    return InMemoryAppointmentRepository()


@pytest.fixture
def user_service(user_repo) -> UserService:
    """UserService wired to a real in-memory repository."""
    return UserService(user_repo)


@pytest.fixture
def appointment_service(appointment_repo) -> AppointmentService:
    """AppointmentService wired to a real in-memory repository."""
    return AppointmentService(appointment_repo)


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by every application built in tests."""
    return Settings(testing=True, log_level="WARNING", log_to_file=False)


@pytest.fixture
def app(test_settings, user_repo, appointment_repo):
    """Flask application sharing the repositories exposed as fixtures."""
    return create_app(
        test_settings, user_repo=user_repo, appointment_repo=appointment_repo
    )


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
