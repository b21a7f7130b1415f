from typing import Annotated

from pydantic import StringConstraints

from .base import CamelModel, UtcDateTime

LegalContent = Annotated[str, StringConstraints(max_length=200_000)]


class LegalDocUpdate(CamelModel):
    content: LegalContent


class LegalDoc(CamelModel):
    type: str
    content: str
    updated_at: UtcDateTime
