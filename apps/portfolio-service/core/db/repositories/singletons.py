"""
Fixed-key singleton records: the about profile and the legal documents.

No create or delete is exposed; rows are seeded by migration (or
`seed_singletons` for scratch databases) and only ever updated in place.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from core.db import models
from core.db.models.base import now_utc
from core.utils.choices import ABOUT_INFO_KEY, LegalDocType

DEFAULT_ABOUT = {
    "name": "Your Name",
    "title": "Full Stack Developer",
    "bio": "Tell visitors about yourself.",
}

DEFAULT_LEGAL_CONTENT = {
    LegalDocType.privacy_policy.value: "Your default privacy policy content goes here.",
    LegalDocType.terms_of_service.value: "Your default terms of service content goes here.",
}


def get_about(db: Session) -> Optional[models.AboutInfo]:
    return db.get(models.AboutInfo, ABOUT_INFO_KEY)


def update_about(db: Session, changes: Dict[str, Any]) -> Optional[models.AboutInfo]:
    info = get_about(db)
    if info is None:
        return None
    for key, value in changes.items():
        setattr(info, key, value)
    info.updated_at = now_utc()
    db.commit()
    db.refresh(info)
    return info


def get_legal_doc(db: Session, doc_type: str) -> Optional[models.LegalDoc]:
    return db.get(models.LegalDoc, doc_type)


def update_legal_doc(db: Session, doc_type: str, content: str) -> Optional[models.LegalDoc]:
    doc = get_legal_doc(db, doc_type)
    if doc is None:
        return None
    doc.content = content
    doc.updated_at = now_utc()
    db.commit()
    db.refresh(doc)
    return doc


def seed_singletons(db: Session, about: Optional[Dict[str, Any]] = None) -> int:
    """Insert any missing singleton rows with defaults. Returns rows created."""
    created = 0
    if get_about(db) is None:
        db.add(models.AboutInfo(id=ABOUT_INFO_KEY, **(about or DEFAULT_ABOUT)))
        created += 1
    for doc_type, content in DEFAULT_LEGAL_CONTENT.items():
        if get_legal_doc(db, doc_type) is None:
            db.add(models.LegalDoc(id=doc_type, type=doc_type, content=content))
            created += 1
    if created:
        db.commit()
    return created
