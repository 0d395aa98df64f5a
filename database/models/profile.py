from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, JSON, func
from sqlalchemy.orm import relationship

from .base import Base, utc_now


class JobSeeker(Base):
    """
    Job seeker profile. One per user.

    skills is a JSON list of free-text skill names; the scorer lower-cases
    them at match time so the stored casing is whatever the user typed.
    """
    __tablename__ = 'job_seekers'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)

    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text)
    location = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    bio = Column(Text)
    skills = Column(JSON, nullable=False, default=list)
    experience_years = Column(Integer, nullable=False, default=0)
    education = Column(Text)

    # Opaque blob store URL
    resume_url = Column(Text)
    linkedin_url = Column(Text)
    github_url = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, server_default=func.now(), onupdate=utc_now)

    # Relationships
    user = relationship("User", back_populates="job_seeker")
    applications = relationship("Application", back_populates="job_seeker", cascade="all, delete-orphan")


class Recruiter(Base):
    """Recruiter / company profile. One per user."""
    __tablename__ = 'recruiters'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)

    company_name = Column(Text, nullable=False)
    contact_name = Column(Text, nullable=False)
    phone = Column(Text)
    company_website = Column(Text)
    company_description = Column(Text)
    company_size = Column(Text)
    industry = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="recruiter")
    jobs = relationship("JobPost", back_populates="recruiter", cascade="all, delete-orphan")
