"""
Project endpoints.

Reads are public and served through the content cache; writes require an
admin session.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.api.deps import get_current_admin
from core.db import schemas
from core.db.database import get_db
from core.services.content_service import ContentService

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[schemas.Project])
def list_projects(featured: bool = False, db: Session = Depends(get_db)):
    """
    List projects by display order.

    - **featured**: only return projects flagged as featured
    """
    return ContentService(db).public_projects(featured=featured)


@router.get("/{project_id}", response_model=schemas.Project)
def get_project(project_id: uuid.UUID, db: Session = Depends(get_db)):
    return ContentService(db).get("projects", project_id)


@router.post("", response_model=schemas.Project, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: schemas.ProjectCreate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).create("projects", payload)


@router.put("/{project_id}", response_model=schemas.Project)
def update_project(
    project_id: uuid.UUID,
    payload: schemas.ProjectUpdate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).update("projects", project_id, payload)


@router.delete("/{project_id}")
def delete_project(
    project_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    ContentService(db).delete("projects", project_id)
    return {"message": "Project deleted successfully"}
