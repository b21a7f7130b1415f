"""
Skill-specific repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Sequence

from sqlalchemy.orm import Session

from core.db import models, schemas


def reorder_skills(db: Session, items: Sequence[schemas.SkillOrderItem]) -> List[uuid.UUID]:
    """Apply category/order for every item in one transaction.

    Returns the ids that do not exist; when any are missing nothing is written.
    """
    wanted = {item.id for item in items}
    rows = db.query(models.Skill).filter(models.Skill.id.in_(wanted)).all()
    by_id = {row.id: row for row in rows}
    missing = [item.id for item in items if item.id not in by_id]
    if missing:
        return missing
    for item in items:
        row = by_id[item.id]
        row.category = item.category
        row.order = item.order
    db.commit()
    return []
