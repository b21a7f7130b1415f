"""
Admin user repository functions.

Users are only ever created by the seed script; there is no public API.
"""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from core.db import models


def get_user(db: Session, user_id: uuid.UUID) -> Optional[models.User]:
    return db.get(models.User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def create_user(db: Session, *, username: str, password_hash: str, is_admin: bool = True) -> models.User:
    user = models.User(username=username, password_hash=password_hash, is_admin=is_admin)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def set_password_hash(db: Session, user: models.User, password_hash: str) -> models.User:
    user.password_hash = password_hash
    db.commit()
    db.refresh(user)
    return user
