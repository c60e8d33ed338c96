"""
Custom exceptions for the application.
Centralized error taxonomy shared by entities, services and controllers.
"""


class AgendaError(Exception):
    """
    Base class for every business-rule failure.

    Carries the human-readable message returned to API clients and the
    HTTP status code the controllers map it to.
    """

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AgendaError, ValueError):
    """Raised when entity input is malformed (name, email or date rules)."""

    status_code = 400


class ConflictError(AgendaError):
    """
    Raised when an operation clashes with stored state: duplicate email,
    overlapping appointment or deleting an already deleted user.
    """

    status_code = 400


class NotFoundError(AgendaError):
    """Raised when an id does not match any stored entity."""

    status_code = 404
