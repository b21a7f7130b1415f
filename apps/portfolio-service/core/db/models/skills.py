from sqlalchemy import Column, String, Integer, Uuid, CheckConstraint
from .base import Base, new_id


class Skill(Base):
    __tablename__ = 'skills'
    id = Column(Uuid, primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    category = Column(String(20), nullable=False)
    proficiency = Column(Integer, nullable=False)
    icon = Column(String(100), nullable=True)
    order = Column('order', Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint('proficiency BETWEEN 1 AND 100', name='ck_skills_proficiency_range'),
    )
