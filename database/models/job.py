from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, JSON, Index, func
from sqlalchemy.orm import relationship

from .base import Base, utc_now


class JobPost(Base):
    __tablename__ = 'jobs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    recruiter_id = Column(Integer, ForeignKey('recruiters.id', ondelete='CASCADE'), nullable=False)

    # Core
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    job_type = Column(Text, nullable=False)  # full-time|part-time|contract|internship|...

    # Matching inputs
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    experience_required = Column(Integer, default=0)
    skills_required = Column(JSON, nullable=False, default=list)

    status = Column(Text, nullable=False, default='active')  # active|closed
    applications_count = Column(Integer, nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, server_default=func.now())

    # Relationships
    recruiter = relationship("Recruiter", back_populates="jobs")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_jobs_status_created', 'status', 'created_at'),
        Index('idx_jobs_recruiter', 'recruiter_id'),
    )
