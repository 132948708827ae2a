"""UUID generation utilities.

This module centralizes all UUID generation. This is the ONLY module that
should import uuid4. All other code should use uid.generate_uuid().
"""

from uuid import UUID, uuid4


def generate_uuid() -> str:
    """Generate a random UUID v4 as a string."""
    return str(uuid4())


def is_uuid(value: str) -> bool:
    """Return True if value parses as a UUID."""
    try:
        UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True
