"""Pydantic schemas for blog posts."""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

# Largest value a SQLite INTEGER column holds
LIKES_MAX = 2**63 - 1


class BlogCreate(BaseModel):
    """Schema for creating a blog.

    likes defaults to 0 when omitted; a negative or non-integer value is
    rejected rather than corrected.
    """

    title: str | None = Field(default=None, validate_default=True)
    author: str | None = None
    url: str | None = Field(default=None, validate_default=True)
    likes: int = Field(default=0, ge=0, le=LIKES_MAX, strict=True)

    @field_validator("title", "url")
    @classmethod
    def require_non_blank(cls, v: str | None, info: ValidationInfo) -> str:
        if v is None or not v.strip():
            raise ValueError(f"{info.field_name} is required")
        return v


class BlogLikesUpdate(BaseModel):
    """Schema for replacing a blog's likes count."""

    likes: int = Field(..., ge=0, le=LIKES_MAX, strict=True)


class BlogOwner(BaseModel):
    """Owner of a blog as shown to clients."""

    id: str
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """External representation of a blog."""

    id: str
    title: str
    author: str | None = None
    url: str
    likes: int
    user: BlogOwner
