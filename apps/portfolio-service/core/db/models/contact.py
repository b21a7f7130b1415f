from sqlalchemy import Column, String, Text, DateTime, Boolean, Uuid, Index
from .base import Base, now_utc, new_id


class ContactMessage(Base):
    __tablename__ = 'contact_messages'
    id = Column(Uuid, primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    email = Column(String(320), nullable=False)
    subject = Column(String(200), nullable=True)
    project_type = Column(String(100), nullable=True)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    starred = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_contact_messages_created', 'created_at'),
    )
