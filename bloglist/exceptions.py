"""Exception hierarchy for the bloglist API.

Every exception carries a human-readable ``message`` and an optional
``details`` dict. Error handlers in ``bloglist.main`` map each class to an
HTTP status code; ``details`` is logged server-side and never returned.
"""


class BloglistError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(BloglistError):
    """Malformed, missing or out-of-range input (400)."""


class ConflictError(ValidationError):
    """Uniqueness violation, e.g. a username that is already taken (400)."""


class AuthenticationError(BloglistError):
    """Missing, invalid or expired token, or bad credentials (401)."""


class PermissionDenied(AuthenticationError):
    """Authenticated caller is not allowed to touch the resource (403)."""


class ResourceNotFound(BloglistError):
    """Unknown resource id (404)."""


class DatabaseError(BloglistError):
    """Store unavailable or locked; the request may be retried (503)."""


class HashingError(BloglistError):
    """Password hashing failed (500)."""
