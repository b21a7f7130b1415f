"""Business logic services package with public service helpers."""

from .content_cache import (
    ContentCache,
    get_content_cache,
    reset_content_cache_for_tests,
)
from .content_service import ContentService
from .validation import validate, validate_with, field_errors

__all__ = [
    "ContentCache",
    "get_content_cache",
    "reset_content_cache_for_tests",
    "ContentService",
    "validate",
    "validate_with",
    "field_errors",
]
