"""Admin image upload endpoint (multipart field `image`)."""
from fastapi import APIRouter, Depends, File, UploadFile

from core.api.deps import get_current_admin
from core.services.image_uploads import store_image
from core.utils.settings import get_settings

router = APIRouter(prefix="/api/upload", tags=["uploads"])


@router.post("/image")
def upload_image(image: UploadFile = File(...), admin=Depends(get_current_admin)):
    # One byte past the limit is enough to detect oversize
    data = image.file.read(get_settings().upload_max_bytes + 1)
    return {"imageUrl": store_image(image.filename, image.content_type, data)}
