"""Custom SQLAlchemy types used by the persistence layer."""
from __future__ import annotations

import json
from typing import Iterable, List, Optional

from sqlalchemy.types import Text, TypeDecorator


class JSONEncodedList(TypeDecorator[List[str]]):
    """Store an ordered list of strings as a JSON array in a TEXT column.

    Rows written by older tooling occasionally hold a bare comma-separated
    string instead of JSON; those are split on read.
    """

    cache_ok = True
    impl = Text

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, Iterable):
            raise TypeError(f"JSONEncodedList expects an iterable of strings, got {type(value)!r}")
        return json.dumps([str(item) for item in value])

    def process_result_value(self, value, dialect) -> Optional[List[str]]:  # type: ignore[override]
        if value is None:
            return None
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            return [part.strip() for part in value.split(",") if part.strip()]
        if isinstance(parsed, list):
            return [str(item) for item in parsed]
        return [str(parsed)]

    def copy(self, **kwargs):  # type: ignore[override]
        return JSONEncodedList()
