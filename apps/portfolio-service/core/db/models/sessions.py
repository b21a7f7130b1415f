from sqlalchemy import Column, String, DateTime, ForeignKey, Text, Index, Uuid
from .base import Base, now_utc, new_id


class AdminSession(Base):
    __tablename__ = 'admin_sessions'

    id = Column(Uuid, primary_key=True, default=new_id)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    # Token identity and secret hash (never store raw secret)
    token_id = Column(String(64), nullable=False, unique=True)
    token_hash = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    last_used_at = Column(DateTime(timezone=True), nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    revoked_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_admin_sessions_user', 'user_id'),
    )
