from sqlalchemy import Column, String, Text, DateTime
from .base import Base, now_utc


class LegalDoc(Base):
    """One row per document type; the type doubles as the primary key."""

    __tablename__ = 'legal_docs'
    id = Column(String(40), primary_key=True)
    type = Column(String(40), nullable=False, unique=True)
    content = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)
