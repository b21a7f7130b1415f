import re
import uuid
from typing import Annotated, Optional

from pydantic import AfterValidator, EmailStr, StringConstraints

from .base import CamelModel, UtcDateTime

_NAME_CHARS = re.compile(r"^[A-Za-z\s]+$")


def _letters_and_spaces(value: str) -> str:
    if not _NAME_CHARS.match(value):
        raise ValueError("Name can only contain letters and spaces")
    return value


ContactName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=2, max_length=100),
    AfterValidator(_letters_and_spaces),
]
Subject = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
ProjectType = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
MessageBody = Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=1000)]


class ContactMessageCreate(CamelModel):
    """Visitor submission; read/starred/created_at are server-owned."""

    name: ContactName
    email: EmailStr
    subject: Subject
    project_type: Optional[ProjectType] = None
    message: MessageBody


class ContactMessage(CamelModel):
    id: uuid.UUID
    name: str
    email: str
    subject: Optional[str] = None
    project_type: Optional[str] = None
    message: str
    read: bool
    starred: bool
    created_at: UtcDateTime


class StarredUpdate(CamelModel):
    starred: bool
