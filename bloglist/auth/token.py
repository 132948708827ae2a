"""JWT token service.

Tokens are HS256-signed with settings.jwt_secret_key and carry:
- sub: user ID
- username
- iat: issued-at (Unix seconds)
- exp: expiry (Unix seconds), omitted when settings.jwt_expiry_days is 0

Tokens are stateless; nothing is stored server-side.
"""

from datetime import timedelta
from typing import Any

import jwt

from ..config import settings
from ..utils import isodatetime
from .schemas import TokenPayload, UserResponse

_REQUIRED_CLAIMS = ["sub", "username", "iat"]


def generate_access_token(user: UserResponse) -> str:
    """
    Generate a signed access token for a user.

    Args:
        user: The user the token identifies

    Returns:
        Encoded JWT string
    """
    now = isodatetime.now_unix()
    payload: dict[str, Any] = {
        "sub": user.id,
        "username": user.username,
        "iat": now,
    }
    if settings.jwt_expiry_days:
        payload["exp"] = now + settings.jwt_expiry_days * 24 * 60 * 60

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def validate_access_token(token: str) -> TokenPayload:
    """
    Verify signature and claims of an access token.

    Returns:
        Decoded payload

    Raises:
        jwt.ExpiredSignatureError: If the token carries an exp in the past
        jwt.InvalidTokenError: If the token is malformed, tampered with,
            or missing required claims
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": _REQUIRED_CLAIMS},
    )
    return TokenPayload(**payload)


def get_token_expiry_remaining(token: str) -> timedelta | None:
    """
    Time left before a valid token expires.

    Returns:
        Remaining time, or None if the token is invalid, expired, or
        does not expire at all
    """
    try:
        payload = validate_access_token(token)
    except jwt.InvalidTokenError:
        return None

    if payload.exp is None:
        return None

    return isodatetime.from_unix(payload.exp) - isodatetime.from_unix(isodatetime.now_unix())
