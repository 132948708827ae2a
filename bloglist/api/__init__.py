"""Shared helpers for the HTTP boundary."""

from .validation import validate_request

__all__ = ["validate_request"]
