"""Utility functions for the bloglist API.

This package provides centralized utilities for common operations.
Import convention: use module-level imports for clarity.

    from bloglist.utils import isodatetime, uid
    timestamp = isodatetime.now()
    user_id = uid.generate_uuid()
"""

from . import isodatetime, uid

__all__ = ["isodatetime", "uid"]
