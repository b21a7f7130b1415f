from sqlalchemy import Column, String, Text, DateTime, Integer, Boolean
from .base import Base, now_utc
from core.utils.choices import ABOUT_INFO_KEY


class AboutInfo(Base):
    """Singleton profile row, always stored under ``ABOUT_INFO_KEY``."""

    __tablename__ = 'about_info'
    id = Column(String(20), primary_key=True, default=ABOUT_INFO_KEY)
    name = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    bio = Column(Text, nullable=False)
    avatar_url = Column(Text, nullable=True)
    resume_url = Column(Text, nullable=True)
    github_url = Column(Text, nullable=True)
    linkedin_url = Column(Text, nullable=True)
    twitter_url = Column(Text, nullable=True)
    instagram_url = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    phone = Column(String(50), nullable=True)
    location = Column(String(200), nullable=True)
    available_for_work = Column(Boolean, nullable=False, default=True)
    response_time = Column(String(100), nullable=True, default="24 hours")
    working_hours = Column(String(100), nullable=True, default="9 AM - 6 PM EST")
    # Metrics
    completed_projects = Column(Integer, nullable=False, default=0)
    total_clients = Column(Integer, nullable=False, default=0)
    years_experience = Column(Integer, nullable=False, default=0)
    technologies_count = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)
