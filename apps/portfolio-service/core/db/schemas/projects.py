import uuid
from typing import Annotated, List, Optional

from pydantic import StringConstraints, field_validator

from .base import CamelModel, OptionalReference, OptionalUrl, SortOrder, UtcDateTime, reject_null

ProjectTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
ProjectDescription = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=5000)]
Technology = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)]


def _require_technology(v):
    if v is not None and len(v) == 0:
        raise ValueError("At least one technology is required")
    return v


class ProjectCreate(CamelModel):
    title: ProjectTitle
    description: ProjectDescription
    image_url: OptionalReference = None
    github_url: OptionalUrl = None
    live_url: OptionalUrl = None
    technologies: List[Technology]
    featured: bool = False
    order: SortOrder = 0

    @field_validator("technologies")
    @classmethod
    def require_technology(cls, v):
        return _require_technology(v)


class ProjectUpdate(CamelModel):
    title: Optional[ProjectTitle] = None
    description: Optional[ProjectDescription] = None
    image_url: OptionalReference = None
    github_url: OptionalUrl = None
    live_url: OptionalUrl = None
    technologies: Optional[List[Technology]] = None
    featured: Optional[bool] = None
    order: Optional[SortOrder] = None

    @field_validator("technologies")
    @classmethod
    def require_technology(cls, v):
        return _require_technology(v)

    @field_validator("title", "description", "technologies", "featured", "order")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class Project(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    image_url: Optional[str] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    technologies: List[str]
    featured: bool
    order: int
    created_at: UtcDateTime
