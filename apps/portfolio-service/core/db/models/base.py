"""
Shared SQLAlchemy base and helpers.
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(timezone.utc)


def new_id():
    return uuid.uuid4()


Base = declarative_base()
