from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, utc_now


class Application(Base):
    """A job seeker's application to a posting."""
    __tablename__ = 'applications'

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(Integer, ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)
    job_seeker_id = Column(Integer, ForeignKey('job_seekers.id', ondelete='CASCADE'), nullable=False)

    cover_letter = Column(Text, nullable=False, default='')
    status = Column(Text, nullable=False, default='pending')  # pending|reviewed|accepted|rejected
    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, server_default=func.now())

    # Relationships
    job = relationship("JobPost", back_populates="applications")
    job_seeker = relationship("JobSeeker", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('job_id', 'job_seeker_id', name='uq_application_job_seeker'),
        Index('idx_applications_seeker', 'job_seeker_id'),
        Index('idx_applications_job', 'job_id'),
    )
