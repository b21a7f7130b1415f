"""
Contact form submission (public) and message moderation (admin).
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.api.deps import get_current_admin
from core.db import schemas
from core.db.database import get_db
from core.services.content_service import ContentService

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", response_model=schemas.ContactMessage, status_code=status.HTTP_201_CREATED)
def submit_contact(payload: schemas.ContactMessageCreate, db: Session = Depends(get_db)):
    return ContentService(db).submit_contact(payload)


@router.get("/messages", response_model=List[schemas.ContactMessage])
def list_messages(db: Session = Depends(get_db), admin=Depends(get_current_admin)):
    return ContentService(db).list("contact_messages")


@router.get("/messages/{message_id}", response_model=schemas.ContactMessage)
def get_message(
    message_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).get("contact_messages", message_id)


@router.put("/messages/{message_id}/read", response_model=schemas.ContactMessage)
def mark_message_read(
    message_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).mark_message_read(message_id)


@router.put("/messages/{message_id}/starred", response_model=schemas.ContactMessage)
def set_message_starred(
    message_id: uuid.UUID,
    payload: schemas.StarredUpdate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).set_message_starred(message_id, payload)


@router.delete("/messages/{message_id}")
def delete_message(
    message_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    ContentService(db).delete("contact_messages", message_id)
    return {"message": "Message deleted successfully"}
