"""
Image upload storage.

Files land in `UPLOAD_DIR` under a random name that keeps the original
extension, and are served back from `/uploads/<name>`.
"""
from __future__ import annotations

import logging
import os
import secrets
import time
from typing import Optional

from core.errors import ContentValidationError, FieldError, PayloadTooLargeError
from core.utils.settings import get_settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"
ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}


def _reject(message: str) -> ContentValidationError:
    return ContentValidationError([FieldError(field="image", message=message)])


def _extension(filename: Optional[str]) -> str:
    return os.path.splitext(filename or "")[1].lower()


def check_image(filename: Optional[str], content_type: Optional[str]) -> str:
    """Return the normalized extension or raise ContentValidationError."""
    ext = _extension(filename)
    if ext not in ALLOWED_EXTENSIONS or (content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
        raise _reject("Only image files are allowed (jpeg, jpg, png, gif, webp)")
    return ext


def store_image(filename: Optional[str], content_type: Optional[str], data: bytes) -> str:
    """Persist an uploaded image and return its public URL path."""
    settings = get_settings()
    if not data:
        raise _reject("No file uploaded")
    if len(data) > settings.upload_max_bytes:
        raise PayloadTooLargeError(settings.upload_max_bytes)
    ext = check_image(filename, content_type)
    os.makedirs(settings.upload_dir, exist_ok=True)
    name = f"image-{int(time.time() * 1000)}-{secrets.token_hex(6)}{ext}"
    with open(os.path.join(settings.upload_dir, name), "wb") as fh:
        fh.write(data)
    logger.info("image_uploaded", extra={"file": name, "bytes": len(data)})
    return f"{UPLOAD_URL_PREFIX}/{name}"
