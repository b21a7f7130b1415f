import uuid
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator

from .base import CamelModel, OptionalReference, SortOrder, UtcDateTime, reject_null

PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
ShortText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
TestimonialContent = Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=1000)]
Rating = Annotated[int, Field(strict=True, ge=1, le=5)]


class TestimonialCreate(CamelModel):
    name: PersonName
    role: Optional[ShortText] = None
    company: Optional[ShortText] = None
    content: TestimonialContent
    rating: Rating = 5
    avatar_url: OptionalReference = None
    is_visible: bool = False
    order: SortOrder = 0


class TestimonialUpdate(CamelModel):
    name: Optional[PersonName] = None
    role: Optional[ShortText] = None
    company: Optional[ShortText] = None
    content: Optional[TestimonialContent] = None
    rating: Optional[Rating] = None
    avatar_url: OptionalReference = None
    is_visible: Optional[bool] = None
    order: Optional[SortOrder] = None

    @field_validator("name", "content", "rating", "is_visible", "order")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class Testimonial(CamelModel):
    id: uuid.UUID
    name: str
    role: Optional[str] = None
    company: Optional[str] = None
    content: str
    rating: int
    avatar_url: Optional[str] = None
    is_visible: bool
    order: int
    created_at: UtcDateTime
