"""
Entity validation entry point.

`validate(kind, candidate)` is the one place request handlers, scripts and
tests go through to turn raw input into a normalized record. Failures are
collected for every field and raised together as `ContentValidationError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Type

from pydantic import BaseModel, ValidationError

from core.db import schemas
from core.errors import ContentValidationError, FieldError

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}
_VALUE_ERROR_PREFIX = "Value error, "


@dataclass(frozen=True)
class SchemaPair:
    create: Type[BaseModel]
    update: Type[BaseModel]


SCHEMAS: Dict[str, SchemaPair] = {
    "projects": SchemaPair(schemas.ProjectCreate, schemas.ProjectUpdate),
    "skills": SchemaPair(schemas.SkillCreate, schemas.SkillUpdate),
    "testimonials": SchemaPair(schemas.TestimonialCreate, schemas.TestimonialUpdate),
    # Messages are never edited, so partial validation reuses the create schema
    "contact_messages": SchemaPair(schemas.ContactMessageCreate, schemas.ContactMessageCreate),
    "about": SchemaPair(schemas.AboutInfoInput, schemas.AboutInfoUpdate),
    "legal": SchemaPair(schemas.LegalDocUpdate, schemas.LegalDocUpdate),
}


def _field_name(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or "body"


def _message(msg: str) -> str:
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg


def field_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """Convert Pydantic/FastAPI error dicts into FieldErrors."""
    return [FieldError(field=_field_name(e.get("loc", ())), message=_message(str(e.get("msg", "")))) for e in errors]


def validate_with(schema: Type[BaseModel], candidate: Any) -> BaseModel:
    try:
        return schema.model_validate(candidate)
    except ValidationError as exc:
        raise ContentValidationError(field_errors(exc.errors())) from exc


def validate(kind: str, candidate: Any, *, partial: bool = False) -> BaseModel:
    """Return the normalized record for ``kind`` or raise ContentValidationError."""
    try:
        pair = SCHEMAS[kind]
    except KeyError:
        raise ValueError(f"Unknown content kind: {kind}")
    return validate_with(pair.update if partial else pair.create, candidate)
