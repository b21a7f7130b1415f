from sqlalchemy import Column, String, DateTime, Boolean, Text, Uuid
from .base import Base, now_utc, new_id


class User(Base):
    __tablename__ = 'users'
    id = Column(Uuid, primary_key=True, default=new_id)
    username = Column(String(50), nullable=False, unique=True, index=True)
    # argon2id hash; the raw password is never stored
    password_hash = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
