"""
Content service: admin mutation flows and public read flows.

Every admin write goes validate -> persist -> invalidate public cache; public
reads are served through the cache and never validate. Repositories report
absent rows as None/False and this layer turns them into NotFoundError.
"""
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import models, schemas
from core.db.repositories import collections as repo
from core.db.repositories import messages as repo_messages
from core.db.repositories import singletons as repo_singletons
from core.db.repositories import skills as repo_skills
from core.errors import NotFoundError, StorageError
from core.services.content_cache import ContentCache, get_content_cache
from core.services.validation import validate, validate_with
from core.utils.choices import is_valid_legal_doc_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collection:
    kind: str
    label: str
    model: Type[models.Base]
    read_schema: Type[BaseModel]
    # None when the collection is never served publicly
    cache_key: Optional[str]


COLLECTIONS: Dict[str, Collection] = {
    "projects": Collection("projects", "Project", models.Project, schemas.Project, "projects"),
    "skills": Collection("skills", "Skill", models.Skill, schemas.Skill, "skills"),
    "testimonials": Collection("testimonials", "Testimonial", models.Testimonial, schemas.Testimonial, "testimonials"),
    "contact_messages": Collection("contact_messages", "Message", models.ContactMessage, schemas.ContactMessage, None),
}

ABOUT_CACHE_KEY = "about"
LEGAL_CACHE_KEY = "legal"


def _collection(kind: str) -> Collection:
    try:
        return COLLECTIONS[kind]
    except KeyError:
        raise ValueError(f"Unknown collection: {kind}")


class ContentService:
    """Service class for reading and mutating site content."""

    def __init__(self, db: Session, cache: Optional[ContentCache] = None):
        self.db = db
        self.cache = cache or get_content_cache()

    @contextmanager
    def _storage(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("storage_failure", extra={"action": action})
            raise StorageError(f"Storage failure during {action}") from exc

    def _invalidate(self, key: Optional[str]) -> None:
        if key:
            self.cache.invalidate(key)

    # ----- generic collection access -----

    def list(self, kind: str, *, filters: Optional[List[Any]] = None) -> List[BaseModel]:
        col = _collection(kind)
        with self._storage(f"list {kind}"):
            rows = repo.list_rows(self.db, col.model, filters=filters)
        return [col.read_schema.model_validate(r) for r in rows]

    def get(self, kind: str, row_id: uuid.UUID) -> BaseModel:
        col = _collection(kind)
        with self._storage(f"get {kind}"):
            row = repo.get_row(self.db, col.model, row_id)
        if row is None:
            raise NotFoundError(col.label, row_id)
        return col.read_schema.model_validate(row)

    def create(self, kind: str, candidate: Any) -> BaseModel:
        col = _collection(kind)
        record = validate(kind, candidate)
        with self._storage(f"create {kind}"):
            row = repo.create_row(self.db, col.model, record.model_dump())
        self._invalidate(col.cache_key)
        logger.info("content_created", extra={"kind": kind, "id": str(row.id)})
        return col.read_schema.model_validate(row)

    def update(self, kind: str, row_id: uuid.UUID, candidate: Any) -> BaseModel:
        col = _collection(kind)
        record = validate(kind, candidate, partial=True)
        changes = record.model_dump(exclude_unset=True)
        with self._storage(f"update {kind}"):
            row = repo.update_row(self.db, col.model, row_id, changes)
        if row is None:
            raise NotFoundError(col.label, row_id)
        self._invalidate(col.cache_key)
        logger.info("content_updated", extra={"kind": kind, "id": str(row_id), "fields": sorted(changes)})
        return col.read_schema.model_validate(row)

    def delete(self, kind: str, row_id: uuid.UUID) -> None:
        """Delete a row; an absent id is NotFoundError, never a silent success."""
        col = _collection(kind)
        with self._storage(f"delete {kind}"):
            deleted = repo.delete_row(self.db, col.model, row_id)
        if not deleted:
            raise NotFoundError(col.label, row_id)
        self._invalidate(col.cache_key)
        logger.info("content_deleted", extra={"kind": kind, "id": str(row_id)})

    # ----- public reads -----

    def public_projects(self, *, featured: bool = False) -> List[BaseModel]:
        if featured:
            return self.cache.get_or_load(
                "projects:featured",
                lambda: self.list("projects", filters=[models.Project.featured.is_(True)]),
            )
        return self.cache.get_or_load("projects", lambda: self.list("projects"))

    def public_skills(self) -> List[BaseModel]:
        return self.cache.get_or_load("skills", lambda: self.list("skills"))

    def public_testimonials(self) -> List[BaseModel]:
        return self.cache.get_or_load(
            "testimonials",
            lambda: self.list("testimonials", filters=[models.Testimonial.is_visible.is_(True)]),
        )

    def public_about(self) -> schemas.AboutInfo:
        return self.cache.get_or_load(ABOUT_CACHE_KEY, self.get_about)

    def public_legal(self, doc_type: str) -> schemas.LegalDoc:
        return self.cache.get_or_load(f"{LEGAL_CACHE_KEY}:{doc_type}", lambda: self.get_legal(doc_type))

    # ----- contact messages -----

    def submit_contact(self, candidate: Any) -> schemas.ContactMessage:
        """Store a visitor submission; read/starred always start false."""
        record = validate("contact_messages", candidate)
        with self._storage("submit contact"):
            row = repo.create_row(
                self.db,
                models.ContactMessage,
                {**record.model_dump(), "read": False, "starred": False},
            )
        logger.info("contact_message_received", extra={"id": str(row.id)})
        return schemas.ContactMessage.model_validate(row)

    def _set_message_flags(self, message_id: uuid.UUID, **flags) -> schemas.ContactMessage:
        with self._storage("update message flags"):
            row = repo_messages.set_message_flags(self.db, message_id, **flags)
        if row is None:
            raise NotFoundError("Message", message_id)
        return schemas.ContactMessage.model_validate(row)

    def mark_message_read(self, message_id: uuid.UUID) -> schemas.ContactMessage:
        return self._set_message_flags(message_id, read=True)

    def set_message_starred(self, message_id: uuid.UUID, candidate: Any) -> schemas.ContactMessage:
        update = validate_with(schemas.StarredUpdate, candidate)
        return self._set_message_flags(message_id, starred=update.starred)

    # ----- skills -----

    def reorder_skills(self, candidate: Any) -> List[BaseModel]:
        request = validate_with(schemas.SkillReorderRequest, candidate)
        with self._storage("reorder skills"):
            missing = repo_skills.reorder_skills(self.db, request.skills)
        if missing:
            raise NotFoundError("Skill", missing[0])
        self._invalidate("skills")
        logger.info("skills_reordered", extra={"count": len(request.skills)})
        return self.list("skills")

    # ----- singletons -----

    def get_about(self) -> schemas.AboutInfo:
        with self._storage("get about"):
            row = repo_singletons.get_about(self.db)
        if row is None:
            raise NotFoundError("About info")
        return schemas.AboutInfo.model_validate(row)

    def update_about(self, candidate: Any) -> schemas.AboutInfo:
        record = validate("about", candidate, partial=True)
        changes = record.model_dump(exclude_unset=True)
        with self._storage("update about"):
            row = repo_singletons.update_about(self.db, changes)
        if row is None:
            raise NotFoundError("About info")
        self._invalidate(ABOUT_CACHE_KEY)
        logger.info("about_updated", extra={"fields": sorted(changes)})
        return schemas.AboutInfo.model_validate(row)

    def get_legal(self, doc_type: str) -> schemas.LegalDoc:
        if not is_valid_legal_doc_type(doc_type):
            raise NotFoundError("Legal document", doc_type)
        with self._storage("get legal"):
            row = repo_singletons.get_legal_doc(self.db, doc_type)
        if row is None:
            raise NotFoundError("Legal document", doc_type)
        return schemas.LegalDoc.model_validate(row)

    def update_legal(self, doc_type: str, candidate: Any) -> schemas.LegalDoc:
        if not is_valid_legal_doc_type(doc_type):
            raise NotFoundError("Legal document", doc_type)
        record = validate("legal", candidate)
        with self._storage("update legal"):
            row = repo_singletons.update_legal_doc(self.db, doc_type, record.content)
        if row is None:
            raise NotFoundError("Legal document", doc_type)
        self._invalidate(f"{LEGAL_CACHE_KEY}:{doc_type}")
        logger.info("legal_doc_updated", extra={"type": doc_type})
        return schemas.LegalDoc.model_validate(row)
