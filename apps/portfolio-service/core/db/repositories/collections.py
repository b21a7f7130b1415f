"""
Generic repository functions for the ordered content collections.

Implements list/get/create/update/delete for projects, skills, testimonials
and contact messages. Absent rows are reported as ``None``/``False``; the
service layer decides how to surface that.
"""
from __future__ import annotations

import uuid
from typing import Any, Dict, Iterable, List, Optional, Type

from sqlalchemy.orm import Session

from core.db import models


def default_ordering(model: Type[models.Base]) -> tuple:
    """Explicit display order first; creation time where no order field exists."""
    if model is models.Project:
        return (models.Project.order.asc(), models.Project.created_at.asc())
    if model is models.Testimonial:
        return (models.Testimonial.order.asc(), models.Testimonial.created_at.asc())
    if model is models.Skill:
        return (models.Skill.order.asc(), models.Skill.name.asc())
    if model is models.ContactMessage:
        return (models.ContactMessage.created_at.asc(),)
    raise ValueError(f"No ordering defined for {model.__name__}")


def list_rows(
    db: Session,
    model: Type[models.Base],
    *,
    filters: Optional[Iterable[Any]] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Any]:
    q = db.query(model)
    for clause in filters or ():
        q = q.filter(clause)
    q = q.order_by(*default_ordering(model))
    if skip:
        q = q.offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def get_row(db: Session, model: Type[models.Base], row_id: uuid.UUID):
    return db.get(model, row_id)


def create_row(db: Session, model: Type[models.Base], values: Dict[str, Any]):
    row = model(**values)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_row(db: Session, model: Type[models.Base], row_id: uuid.UUID, changes: Dict[str, Any]):
    row = db.get(model, row_id)
    if row is None:
        return None
    for key, value in changes.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row


def delete_row(db: Session, model: Type[models.Base], row_id: uuid.UUID) -> bool:
    row = db.get(model, row_id)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    return True
