"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and all ORM classes so callers can simply
`from core.db import models`.
"""

from .base import Base, now_utc  # re-export

# Domain models
from .users import User
from .sessions import AdminSession
from .projects import Project
from .skills import Skill
from .testimonials import Testimonial
from .contact import ContactMessage
from .about import AboutInfo
from .legal import LegalDoc

__all__ = [
    # base
    "Base",
    "now_utc",
    # auth
    "User",
    "AdminSession",
    # collections
    "Project",
    "Skill",
    "Testimonial",
    "ContactMessage",
    # singletons
    "AboutInfo",
    "LegalDoc",
]
