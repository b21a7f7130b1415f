"""
Testimonial endpoints.

Anonymous callers only ever see visible testimonials; `includeHidden=true`
requires an admin session.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.api.deps import get_current_admin, get_optional_admin
from core.db import schemas
from core.db.database import get_db
from core.errors import AuthError
from core.services.content_service import ContentService

router = APIRouter(prefix="/api/testimonials", tags=["testimonials"])


@router.get("", response_model=List[schemas.Testimonial])
def list_testimonials(
    include_hidden: bool = Query(default=False, alias="includeHidden"),
    db: Session = Depends(get_db),
    admin=Depends(get_optional_admin),
):
    service = ContentService(db)
    if include_hidden:
        if admin is None:
            raise AuthError("Authentication required")
        return service.list("testimonials")
    return service.public_testimonials()


@router.get("/{testimonial_id}", response_model=schemas.Testimonial)
def get_testimonial(
    testimonial_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).get("testimonials", testimonial_id)


@router.post("", response_model=schemas.Testimonial, status_code=status.HTTP_201_CREATED)
def create_testimonial(
    payload: schemas.TestimonialCreate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).create("testimonials", payload)


@router.put("/{testimonial_id}", response_model=schemas.Testimonial)
def update_testimonial(
    testimonial_id: uuid.UUID,
    payload: schemas.TestimonialUpdate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).update("testimonials", testimonial_id, payload)


@router.delete("/{testimonial_id}")
def delete_testimonial(
    testimonial_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    ContentService(db).delete("testimonials", testimonial_id)
    return {"message": "Testimonial deleted successfully"}
