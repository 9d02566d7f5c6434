from __future__ import annotations


class AgedCacheError(Exception):
    """Base error for the aged cache."""


class ValidationError(AgedCacheError):
    """Raised when caller input is invalid."""
