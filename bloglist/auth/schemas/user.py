"""Pydantic schemas for users, credentials and tokens.

Request schemas validate input; response schemas are the only external
representation of a user and never carry password_hash.
"""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 3
# bcrypt ignores (or rejects) input past 72 bytes
PASSWORD_MAX_BYTES = 72

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


# ============================================================================
# User Schemas
# ============================================================================


class UserBase(BaseModel):
    """Fields shared by user requests and responses."""

    username: str
    name: str | None = None


class UserCreate(BaseModel):
    """Schema for user registration.

    Fields are validated in declaration order, so a bad username is
    reported before a bad password.
    """

    username: str | None = Field(default=None, validate_default=True)
    name: str | None = Field(default=None, max_length=200)
    password: str | None = Field(default=None, validate_default=True)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str:
        if v is None or len(v) < USERNAME_MIN_LENGTH:
            raise ValueError(
                f"username shorter than the minimum allowed length ({USERNAME_MIN_LENGTH})"
            )
        if not _USERNAME_PATTERN.match(v):
            raise ValueError(
                "username may only contain letters, digits, underscores and hyphens"
            )
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str:
        if v is None or len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"password must be at least {PASSWORD_MIN_LENGTH} characters long"
            )
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(
                f"password must be at most {PASSWORD_MAX_BYTES} bytes long"
            )
        return v


class UserLogin(BaseModel):
    """Schema for login. No strength rules: only the stored hash decides."""

    username: str
    password: str


class UserResponse(UserBase):
    """External representation of a user."""

    id: str
    created_at: datetime


class UserBlogSummary(BaseModel):
    """Blog as listed under its creator."""

    id: str
    title: str
    author: str | None = None
    url: str
    likes: int


class UserWithBlogsResponse(UserResponse):
    """User together with the blogs they created."""

    blogs: list[UserBlogSummary] = []


# ============================================================================
# Token Schemas
# ============================================================================


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    sub: str = Field(..., description="User ID")
    username: str
    iat: int
    exp: int | None = None


class LoginResponse(BaseModel):
    """Response body for a successful login."""

    token: str
    username: str
    name: str | None = None


class AuthenticatedIdentity(BaseModel):
    """Identity resolved from a verified bearer token.

    Passed explicitly to every operation that needs to know the caller.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    name: str | None = None
