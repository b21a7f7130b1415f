import uuid
from typing import Annotated, List, Optional

from pydantic import Field, StringConstraints, field_validator

from core.utils.choices import SkillCategory
from .base import CamelModel, SortOrder, reject_null

SkillName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
Proficiency = Annotated[int, Field(strict=True, ge=1, le=100)]
IconName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]


class SkillCreate(CamelModel):
    name: SkillName
    category: SkillCategory
    proficiency: Proficiency
    icon: Optional[IconName] = None
    order: SortOrder = 0


class SkillUpdate(CamelModel):
    name: Optional[SkillName] = None
    category: Optional[SkillCategory] = None
    proficiency: Optional[Proficiency] = None
    icon: Optional[IconName] = None
    order: Optional[SortOrder] = None

    @field_validator("name", "category", "proficiency", "order")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class Skill(CamelModel):
    id: uuid.UUID
    name: str
    category: str
    proficiency: int
    icon: Optional[str] = None
    order: int


class SkillOrderItem(CamelModel):
    id: uuid.UUID
    category: SkillCategory
    order: SortOrder


class SkillReorderRequest(CamelModel):
    skills: List[SkillOrderItem] = Field(min_length=1)

    @field_validator("skills")
    @classmethod
    def unique_ids(cls, v):
        seen = set()
        for item in v:
            if item.id in seen:
                raise ValueError(f"Skill {item.id} is listed more than once")
            seen.add(item.id)
        return v
