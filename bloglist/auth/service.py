"""Authentication service: password hashing, user registry, credentials.

Password hashing uses bcrypt with a configurable work factor. Plaintext
passwords and hashes never leave this module except as the stored hash
column, and are never logged.

User operations take a Core instance. Writes expect an atomic Core:

    with get_core(atomic=True) as core:
        user = service.create_user(core, data)
"""

import logging
import sqlite3

import bcrypt

from ..config import settings
from ..db import Core
from ..exceptions import ConflictError, HashingError
from ..utils import isodatetime
from .schemas import UserBlogSummary, UserCreate, UserResponse, UserWithBlogsResponse

logger = logging.getLogger(__name__)

# Compared against when the username is unknown, so a failed login costs
# the same as a wrong password
_dummy_hash: str | None = None


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str) -> str:
    """
    Hash a password with bcrypt and a fresh random salt.

    Args:
        password: Plaintext password

    Returns:
        bcrypt hash string (60 characters, $2b$ prefix)

    Raises:
        HashingError: If bcrypt rejects the input
    """
    try:
        salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    except ValueError as e:
        logger.error(f"Password hashing failed: {type(e).__name__}")
        raise HashingError("Password hashing failed") from e
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a bcrypt hash in constant time.

    Returns False (never raises) for a malformed hash or input bcrypt
    refuses to process.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        logger.warning(f"Password verification rejected input: {type(e).__name__}")
        return False


def _get_dummy_hash() -> str:
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("dummy-password-for-timing")
    return _dummy_hash


# ============================================================================
# Row Projection
# ============================================================================


def _row_to_user_response(row: sqlite3.Row) -> UserResponse:
    return UserResponse(
        id=row["id"],
        username=row["username"],
        name=row["name"],
        created_at=isodatetime.to_datetime(row["created_at"]),
    )


# ============================================================================
# User Registry
# ============================================================================


def create_user(core: Core, data: UserCreate) -> UserResponse:
    """
    Register a new user.

    Username and password rules are enforced by UserCreate. Uniqueness is
    enforced by the database constraint so concurrent registrations of the
    same username cannot both succeed.

    Raises:
        ConflictError: If the username is already registered
        HashingError: If the password cannot be hashed
    """
    password_hash = hash_password(data.password)

    try:
        user_id = core.user.create(data.username, password_hash, name=data.name)
    except sqlite3.IntegrityError as e:
        logger.warning(f"Registration rejected, username taken: {data.username}")
        raise ConflictError(
            "username must be unique",
            {"username": data.username}
        ) from e

    return _row_to_user_response(core.user.get_by_id(user_id))


def get_user_by_id(core: Core, user_id: str) -> UserResponse | None:
    row = core.user.get_by_id(user_id)
    return _row_to_user_response(row) if row else None


def get_user_by_username(core: Core, username: str) -> UserResponse | None:
    row = core.user.get_by_username(username)
    return _row_to_user_response(row) if row else None


def list_users(core: Core) -> list[UserWithBlogsResponse]:
    """List every user with a summary of the blogs they created."""
    users = []
    for row in core.user.list():
        blogs = [
            UserBlogSummary(
                id=b["id"],
                title=b["title"],
                author=b["author"],
                url=b["url"],
                likes=b["likes"],
            )
            for b in core.blog.list_by_user(row["id"])
        ]
        user = _row_to_user_response(row)
        users.append(UserWithBlogsResponse(**user.model_dump(), blogs=blogs))
    return users


# ============================================================================
# Credential Verification
# ============================================================================


def verify_credentials(core: Core, username: str, password: str) -> UserResponse | None:
    """
    Verify a username/password pair.

    Returns:
        UserResponse if valid, None otherwise. Callers must not reveal
        which of the two was wrong.
    """
    result = core.user.get_with_password(username)
    if result is None:
        verify_password(password, _get_dummy_hash())
        return None

    row, password_hash = result
    if not verify_password(password, password_hash):
        return None

    return _row_to_user_response(row)
