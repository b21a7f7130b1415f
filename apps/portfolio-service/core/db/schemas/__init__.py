"""
Domain-split Pydantic schemas.

Each entity has a `<Entity>Create` (full record), `<Entity>Update` (partial,
same constraints) and a plain read model used for responses.
"""

from .base import CamelModel, normalize_url, normalize_reference, normalize_optional_email
from .users import LoginRequest, LoginResponse, User
from .projects import ProjectCreate, ProjectUpdate, Project
from .skills import SkillCreate, SkillUpdate, Skill, SkillOrderItem, SkillReorderRequest
from .testimonials import TestimonialCreate, TestimonialUpdate, Testimonial
from .contact import ContactMessageCreate, ContactMessage, StarredUpdate
from .about import AboutInfoInput, AboutInfoUpdate, AboutInfo
from .legal import LegalDocUpdate, LegalDoc

__all__ = [
    "CamelModel",
    "normalize_url",
    "normalize_reference",
    "normalize_optional_email",
    # users
    "LoginRequest",
    "LoginResponse",
    "User",
    # projects
    "ProjectCreate",
    "ProjectUpdate",
    "Project",
    # skills
    "SkillCreate",
    "SkillUpdate",
    "Skill",
    "SkillOrderItem",
    "SkillReorderRequest",
    # testimonials
    "TestimonialCreate",
    "TestimonialUpdate",
    "Testimonial",
    # contact
    "ContactMessageCreate",
    "ContactMessage",
    "StarredUpdate",
    # singletons
    "AboutInfoInput",
    "AboutInfoUpdate",
    "AboutInfo",
    "LegalDocUpdate",
    "LegalDoc",
]
