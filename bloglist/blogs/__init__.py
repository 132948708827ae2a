"""Blog posts: schemas, service operations and HTTP endpoints."""

from . import schemas, service

__all__ = ["schemas", "service"]
