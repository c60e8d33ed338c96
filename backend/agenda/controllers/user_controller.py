"""
User controller for handling HTTP requests.

This controller:
- Handles HTTP concerns only: parsing bodies, path ids and status codes
- Delegates every business rule to UserService
- Hides soft-deleted users unless the client sends ``includesDeleted``
"""

from flask import Blueprint, current_app

from ..core.api_utils import get_json_body, includes_deleted_flag, json_response
from ..core.exceptions import NotFoundError
from ..schemas.dtos import UserCreateRequest, UserResponse
from ..services.user_service import UserService

user_bp = Blueprint("users", __name__, url_prefix="/users")


def _user_service() -> UserService:
    return current_app.extensions["agenda.user_service"]


def _parse_user_id(raw_id: str) -> int:
    try:
        return int(raw_id)
    except ValueError:
        raise NotFoundError("User not found") from None


@user_bp.route("", methods=["POST"])
def create_user():
    """Create a user from ``{"name": ..., "email": ...}``."""
    data = get_json_body()
    user = _user_service().execute(UserCreateRequest.from_payload(data))

    return json_response(
        {
            "message": "User created",
            "user": UserResponse.from_domain(user).to_summary(),
        },
        201,
    )


@user_bp.route("", methods=["GET"])
def list_users():
    """List active users, or every user when ``includesDeleted`` is true."""
    users = _user_service().get_all()
    include_deleted = includes_deleted_flag()

    if not include_deleted:
        users = [user for user in users if user.is_active]

    if not users:
        raise NotFoundError("No users found")

    return json_response(
        {
            "users": [
                UserResponse.from_domain(user).to_dict(include_deleted)
                for user in users
            ]
        }
    )


@user_bp.route("/<user_id>", methods=["GET"])
def get_user(user_id: str):
    """Get one user; soft-deleted users are only visible with ``includesDeleted``."""
    user = _user_service().find_by_id(_parse_user_id(user_id))
    if user is None:
        raise NotFoundError("User not found")

    include_deleted = includes_deleted_flag()
    if user.is_deleted and not include_deleted:
        raise NotFoundError("User not found")

    return json_response(UserResponse.from_domain(user).to_dict(include_deleted))


@user_bp.route("/<user_id>", methods=["DELETE"])
def delete_user(user_id: str):
    """Soft-delete a user."""
    _user_service().delete(_parse_user_id(user_id))

    return json_response(
        {"message": f"User with id {user_id} deleted successfully"}
    )
