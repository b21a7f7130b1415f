from typing import Annotated, Optional

from pydantic import StringConstraints, field_validator

from .base import (
    CamelModel,
    Count,
    OptionalEmailField,
    OptionalReference,
    OptionalUrl,
    UtcDateTime,
    reject_null,
)

RequiredLine = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Bio = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=10000)]
Phone = Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]
Line = Annotated[str, StringConstraints(strip_whitespace=True, max_length=200)]
Shortline = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]

class AboutInfoInput(CamelModel):
    """Full profile; used by seeding and by whole-record validation."""

    name: RequiredLine
    title: RequiredLine
    bio: Bio
    avatar_url: OptionalReference = None
    resume_url: OptionalReference = None
    github_url: OptionalUrl = None
    linkedin_url: OptionalUrl = None
    twitter_url: OptionalUrl = None
    instagram_url: OptionalUrl = None
    email: Optional[OptionalEmailField] = None
    phone: Optional[Phone] = None
    location: Optional[Line] = None
    available_for_work: bool = True
    response_time: Optional[Shortline] = None
    working_hours: Optional[Shortline] = None
    completed_projects: Count = 0
    total_clients: Count = 0
    years_experience: Count = 0
    technologies_count: Count = 0


class AboutInfoUpdate(CamelModel):
    name: Optional[RequiredLine] = None
    title: Optional[RequiredLine] = None
    bio: Optional[Bio] = None
    avatar_url: OptionalReference = None
    resume_url: OptionalReference = None
    github_url: OptionalUrl = None
    linkedin_url: OptionalUrl = None
    twitter_url: OptionalUrl = None
    instagram_url: OptionalUrl = None
    email: Optional[OptionalEmailField] = None
    phone: Optional[Phone] = None
    location: Optional[Line] = None
    available_for_work: Optional[bool] = None
    response_time: Optional[Shortline] = None
    working_hours: Optional[Shortline] = None
    completed_projects: Optional[Count] = None
    total_clients: Optional[Count] = None
    years_experience: Optional[Count] = None
    technologies_count: Optional[Count] = None

    @field_validator(
        "name",
        "title",
        "bio",
        "available_for_work",
        "completed_projects",
        "total_clients",
        "years_experience",
        "technologies_count",
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class AboutInfo(CamelModel):
    name: str
    title: str
    bio: str
    avatar_url: Optional[str] = None
    resume_url: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    twitter_url: Optional[str] = None
    instagram_url: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    available_for_work: bool
    response_time: Optional[str] = None
    working_hours: Optional[str] = None
    completed_projects: int
    total_clients: int
    years_experience: int
    technologies_count: int
    updated_at: UtcDateTime
