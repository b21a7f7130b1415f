"""
Domain error taxonomy.

Routers and services raise these; `core.api.main` maps them to HTTP
responses so handlers never build error payloads by hand.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


class PortfolioError(RuntimeError):
    pass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ContentValidationError(PortfolioError):
    """Every field that failed its constraint, not just the first."""

    def __init__(self, fields: Iterable[FieldError]):
        self.fields: List[FieldError] = list(fields)
        summary = ", ".join(f"{f.field}: {f.message}" for f in self.fields)
        super().__init__(f"Validation failed ({summary})")


class NotFoundError(PortfolioError):
    def __init__(self, entity: str, key=None):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found")


class AuthError(PortfolioError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class StorageError(PortfolioError):
    pass


class MigrationChecksumError(StorageError):
    def __init__(self, revision: str, recorded: str, current: str):
        self.revision = revision
        self.recorded = recorded
        self.current = current
        super().__init__(
            f"Migration {revision} was modified after being applied "
            f"(recorded {recorded[:12]}, now {current[:12]})"
        )


class PayloadTooLargeError(PortfolioError):
    def __init__(self, limit_bytes: int):
        self.limit_bytes = limit_bytes
        super().__init__(f"File too large (limit {limit_bytes} bytes)")
