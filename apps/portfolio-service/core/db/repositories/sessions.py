"""
Repositories for admin login sessions.

Implements create/get/revoke and last-used updates. Only a hash of the
session secret is stored.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from core.db import models
from core.utils import token_crypto


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def create_session(
    db: Session,
    *,
    user_id: uuid.UUID,
    max_age: timedelta,
) -> Tuple[models.AdminSession, str]:
    token_id, secret, full_token = token_crypto.generate_token()
    now = _now()
    session = models.AdminSession(
        user_id=user_id,
        token_id=token_id,
        token_hash=token_crypto.hash_secret(secret),
        created_at=now,
        expires_at=now + max_age,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session, full_token


def get_by_token_id(db: Session, *, token_id: str) -> Optional[models.AdminSession]:
    return (
        db.query(models.AdminSession)
        .filter(models.AdminSession.token_id == token_id)
        .first()
    )


def is_active(session: models.AdminSession, *, now: Optional[datetime] = None) -> bool:
    now = now or _now()
    if session.revoked_at is not None:
        return False
    expires_at = _as_aware(session.expires_at)
    return expires_at is None or expires_at > now


def revoke_session(db: Session, session: models.AdminSession) -> None:
    if session.revoked_at is None:
        session.revoked_at = _now()
        db.commit()


def mark_used_now(db: Session, *, session: models.AdminSession) -> None:
    session.last_used_at = _now()
    try:
        db.commit()
    except Exception:
        db.rollback()
