"""
Legal document endpoints.

`doc_type` is one of the fixed legal document keys; anything else is 404.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.api.deps import get_current_admin
from core.db import schemas
from core.db.database import get_db
from core.services.content_service import ContentService

router = APIRouter(prefix="/api/legal", tags=["legal"])


@router.get("/{doc_type}", response_model=schemas.LegalDoc)
def get_legal_doc(doc_type: str, db: Session = Depends(get_db)):
    return ContentService(db).public_legal(doc_type)


@router.put("/{doc_type}", response_model=schemas.LegalDoc)
def update_legal_doc(
    doc_type: str,
    payload: schemas.LegalDocUpdate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).update_legal(doc_type, payload)
