"""Authentication decorators for protected endpoints.

This module provides the bearer-token guard:
- authenticate_request() - verify the Authorization header, resolve the user
- @auth_required - run the guard and pass the identity to the view

The resolved identity is handed to the view as its ``identity`` keyword
argument rather than stored on flask.g, so every protected view names its
caller in its signature.
"""

import logging
from functools import wraps

import jwt
from flask import request

from ..db import get_core
from ..exceptions import AuthenticationError
from . import service, token
from .schemas import AuthenticatedIdentity

logger = logging.getLogger(__name__)


def _extract_bearer_token() -> str | None:
    """Return the token from 'Authorization: Bearer <token>', or None."""
    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        return None
    return parts[1]


def authenticate_request() -> AuthenticatedIdentity:
    """
    Verify the request's bearer token and resolve the caller.

    Returns:
        Identity of the live user named by the token

    Raises:
        AuthenticationError: "token missing" if there is no usable
            Authorization header, "token expired" or "token invalid" if
            the token does not verify or names an unknown user
    """
    token_str = _extract_bearer_token()
    if token_str is None:
        logger.warning("Unauthenticated request to protected endpoint")
        raise AuthenticationError("token missing", {"code": "missing_auth"})

    try:
        payload = token.validate_access_token(token_str)
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        raise AuthenticationError("token expired", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        raise AuthenticationError("token invalid", {"code": "invalid_token"})

    user = service.get_user_by_id(get_core(), payload.sub)
    if user is None:
        logger.warning(f"Token for unknown user {payload.sub}")
        raise AuthenticationError("token invalid", {"code": "unknown_user"})

    logger.debug(f"JWT authentication successful for user {user.username}")
    return AuthenticatedIdentity(id=user.id, username=user.username, name=user.name)


def auth_required(f):
    """
    Decorator to require a valid bearer token.

    The view receives the caller as ``identity``:

    ```python
    @blogs_bp.post("")
    @auth_required
    def create(identity: AuthenticatedIdentity):
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        identity = authenticate_request()
        return f(*args, identity=identity, **kwargs)

    return wrapper
