"""Authentication Pydantic schemas for API validation."""

from .user import (
    AuthenticatedIdentity,
    LoginResponse,
    TokenPayload,
    UserBase,
    UserBlogSummary,
    UserCreate,
    UserLogin,
    UserResponse,
    UserWithBlogsResponse,
)

__all__ = [
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserBlogSummary",
    "UserWithBlogsResponse",
    "TokenPayload",
    "LoginResponse",
    "AuthenticatedIdentity",
]
