"""Shared Pydantic base classes and field validators for content schemas."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Optional
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


_HTTP_URL = TypeAdapter(AnyHttpUrl)
_EMAIL = TypeAdapter(EmailStr)


def normalize_url(value: str) -> str:
    """Accept '' or an http(s) URL; assume https:// when no scheme is given."""
    value = value.strip()
    if not value:
        return ""
    candidate = value if "://" in value else f"https://{value}"
    try:
        _HTTP_URL.validate_python(candidate)
    except ValidationError:
        raise ValueError("Invalid URL format")
    if not urlparse(candidate).hostname:
        raise ValueError("Invalid URL format")
    return candidate


def normalize_reference(value: str) -> str:
    """Like `normalize_url` but also allows site-relative paths such as /uploads/x.png."""
    value = value.strip()
    if value.startswith("/") and not value.startswith("//"):
        return value
    return normalize_url(value)


def normalize_optional_email(value: str) -> str:
    value = value.strip()
    if not value:
        return ""
    try:
        return str(_EMAIL.validate_python(value))
    except ValidationError:
        raise ValueError("Please enter a valid email address")


def reject_null(value):
    """Partial updates may omit a required field but not null it out."""
    if value is None:
        raise ValueError("Field may not be null")
    return value


UrlField = Annotated[str, AfterValidator(normalize_url)]
ReferenceField = Annotated[str, AfterValidator(normalize_reference)]
OptionalEmailField = Annotated[str, AfterValidator(normalize_optional_email)]

OptionalUrl = Optional[UrlField]
OptionalReference = Optional[ReferenceField]

# Bools are not ints here, and values must fit a 32-bit INTEGER column
INT32_MAX = 2**31 - 1
SortOrder = Annotated[int, Field(strict=True, ge=0, le=INT32_MAX)]
Count = Annotated[int, Field(strict=True, ge=0, le=INT32_MAX)]


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; they are stored as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]
