"""About profile endpoints (singleton record)."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.api.deps import get_current_admin
from core.db import schemas
from core.db.database import get_db
from core.services.content_service import ContentService

router = APIRouter(prefix="/api/about", tags=["about"])


@router.get("", response_model=schemas.AboutInfo)
def get_about(db: Session = Depends(get_db)):
    return ContentService(db).public_about()


@router.put("", response_model=schemas.AboutInfo)
def update_about(
    payload: schemas.AboutInfoUpdate,
    db: Session = Depends(get_db),
    admin=Depends(get_current_admin),
):
    return ContentService(db).update_about(payload)
