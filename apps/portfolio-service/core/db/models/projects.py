from sqlalchemy import Column, String, Text, DateTime, Integer, Boolean, Uuid
from .base import Base, now_utc, new_id
from core.db.types import JSONEncodedList


class Project(Base):
    __tablename__ = 'projects'
    id = Column(Uuid, primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)
    github_url = Column(Text, nullable=True)
    live_url = Column(Text, nullable=True)
    technologies = Column(JSONEncodedList, nullable=False)
    featured = Column(Boolean, nullable=False, default=False)
    order = Column('order', Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
