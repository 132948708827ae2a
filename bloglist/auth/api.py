"""User registration and login endpoints.

- POST /api/users - Register a user
- GET  /api/users - List users with their blogs
- POST /api/login - Authenticate and return a bearer token

All endpoints return JSON. None of them require authentication.
"""

import logging

from flask import Blueprint, jsonify

from ..api.validation import validate_request
from ..db import get_core
from ..exceptions import AuthenticationError
from . import service, token
from .schemas import LoginResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__)


# ============================================================================
# User Registration
# ============================================================================


@auth_bp.post("/users")
@validate_request
def register(data: UserCreate):
    """
    Register a new user.

    Example request:
    ```json
    {
        "username": "root",
        "name": "Superuser",
        "password": "sekret"
    }
    ```

    Returns:
        201: UserResponse (no password hash)
        400: Validation error, including a taken username
    """
    with get_core(atomic=True) as core:
        user = service.create_user(core, data)

    logger.info(f"User registered: {user.username}")

    return jsonify(user.model_dump(mode="json")), 201


@auth_bp.get("/users")
def list_users():
    """
    List all users with a summary of the blogs each one created.

    Returns:
        200: Array of UserWithBlogsResponse
    """
    core = get_core()
    users = service.list_users(core)

    return jsonify([user.model_dump(mode="json") for user in users])


# ============================================================================
# Login
# ============================================================================


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate a user and return a bearer token.

    Accepts both JSON and form data.

    Example response:
    ```json
    {
        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "username": "root",
        "name": "Superuser"
    }
    ```

    Returns:
        200: LoginResponse
        401: Unknown username or wrong password (same message for both)
    """
    core = get_core()
    user = service.verify_credentials(core, data.username, data.password)
    if user is None:
        logger.warning(f"Failed login attempt for username: {data.username}")
        raise AuthenticationError(
            "invalid username or password",
            {"username": data.username}
        )

    access_token = token.generate_access_token(user)
    lifetime = token.get_token_expiry_remaining(access_token)
    expires = f"in {lifetime}" if lifetime else "never"

    logger.info(f"Successful login: {user.username} (token expires {expires})")

    return jsonify(
        LoginResponse(
            token=access_token,
            username=user.username,
            name=user.name
        ).model_dump()
    ), 200
