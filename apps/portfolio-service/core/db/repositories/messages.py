"""
Contact message moderation.

Messages are visitor-authored; the admin can only flip read/starred flags
or delete them (see ``collections.delete_row``).
"""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from core.db import models


def set_message_flags(
    db: Session,
    message_id: uuid.UUID,
    *,
    read: Optional[bool] = None,
    starred: Optional[bool] = None,
) -> Optional[models.ContactMessage]:
    msg = db.get(models.ContactMessage, message_id)
    if msg is None:
        return None
    if read is not None:
        msg.read = read
    if starred is not None:
        msg.starred = starred
    db.commit()
    db.refresh(msg)
    return msg
