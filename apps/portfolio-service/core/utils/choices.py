"""
Closed value sets and fixed singleton keys.

Centralized definitions for enum-like content fields to eliminate
string literals scattered across the codebase.
"""

from enum import Enum
from typing import FrozenSet


class SkillCategory(str, Enum):
    frontend = "Frontend"
    backend = "Backend"
    graphics = "3D/Graphics"
    tools = "Tools"
    other = "Other"


class LegalDocType(str, Enum):
    privacy_policy = "privacy_policy"
    terms_of_service = "terms_of_service"


LEGAL_DOC_TYPES: FrozenSet[str] = frozenset(t.value for t in LegalDocType)

# The about_info table holds exactly one row under this key
ABOUT_INFO_KEY = "main"


def is_valid_legal_doc_type(doc_type: str) -> bool:
    return doc_type in LEGAL_DOC_TYPES
