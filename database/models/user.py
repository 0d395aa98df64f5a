from sqlalchemy import Column, Integer, Text, TIMESTAMP, Index, func
from sqlalchemy.orm import relationship

from .base import Base, utc_now

USER_TYPES = ('job_seeker', 'recruiter')


class User(Base):
    """
    User account. Only the password hash is stored.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    user_type = Column(Text, nullable=False)  # job_seeker|recruiter
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utc_now, server_default=func.now())

    # Relationships
    job_seeker = relationship("JobSeeker", back_populates="user", uselist=False, cascade="all, delete-orphan")
    recruiter = relationship("Recruiter", back_populates="user", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_email', 'email'),
    )
