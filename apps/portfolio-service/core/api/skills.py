"""
Skill endpoints, including batch reordering from the admin drag-and-drop
board.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.api.deps import get_current_admin
from core.db import schemas
from core.db.database import get_db
from core.services.content_service import ContentService

router = APIRouter(prefix="/api/skills", tags=["skills"])


@router.get("", response_model=List[schemas.Skill])
def list_skills(db: Session = Depends(get_db)):
    return ContentService(db).public_skills()


@router.post("", response_model=schemas.Skill, status_code=status.HTTP_201_CREATED)
def create_skill(
    payload: schemas.SkillCreate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).create("skills", payload)


@router.post("/reorder", response_model=List[schemas.Skill])
def reorder_skills(
    payload: schemas.SkillReorderRequest,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    """Apply category/order for every listed skill; unknown ids abort the batch."""
    return ContentService(db).reorder_skills(payload)


@router.put("/{skill_id}", response_model=schemas.Skill)
def update_skill(
    skill_id: uuid.UUID,
    payload: schemas.SkillUpdate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).update("skills", skill_id, payload)


@router.delete("/{skill_id}")
def delete_skill(
    skill_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    ContentService(db).delete("skills", skill_id)
    return {"message": "Skill deleted successfully"}
