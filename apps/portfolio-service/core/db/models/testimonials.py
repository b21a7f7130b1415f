from sqlalchemy import Column, String, Text, DateTime, Integer, Boolean, Uuid
from .base import Base, now_utc, new_id


class Testimonial(Base):
    __tablename__ = 'testimonials'
    id = Column(Uuid, primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    role = Column(String(100), nullable=True)
    company = Column(String(100), nullable=True)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=5)
    avatar_url = Column(Text, nullable=True)
    is_visible = Column(Boolean, nullable=False, default=False)
    order = Column('order', Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
