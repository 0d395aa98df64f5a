#!/usr/bin/env python3
"""
Profile service - job seeker and recruiter profiles.
"""

import logging
from sqlalchemy.orm import Session

from database.models import JobSeeker, Recruiter
from database.repositories import UserRepository, JobSeekerRepository, RecruiterRepository
from ..models.requests import JobSeekerProfileCreate, RecruiterProfileCreate
from ..models.responses import JobSeekerProfile, RecruiterProfile
from ..utils import safe_int, safe_list, safe_datetime_iso
from ..exceptions import NotFoundException, ConflictException, ValidationException

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for creating and reading profiles."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.job_seekers = JobSeekerRepository(db)
        self.recruiters = RecruiterRepository(db)

    def _require_user(self, user_id: int, user_type: str) -> None:
        user = self.users.get_by_id(user_id)
        if not user:
            raise NotFoundException(f"User {user_id} not found")
        if user.user_type != user_type:
            raise ValidationException(
                f"User {user_id} is a {user.user_type}, not a {user_type}"
            )

    def create_job_seeker(self, request: JobSeekerProfileCreate) -> JobSeekerProfile:
        """
        Create a job seeker profile.

        Raises:
            NotFoundException: If the user does not exist.
            ValidationException: If the user is not a job seeker.
            ConflictException: If the user already has a profile.
        """
        self._require_user(request.user_id, 'job_seeker')
        if self.job_seekers.get_by_user_id(request.user_id):
            raise ConflictException("Job seeker profile already exists")

        profile = self.job_seekers.create_profile(
            request.user_id,
            request.model_dump(exclude={'user_id'})
        )
        self.db.commit()
        logger.info(f"Created job seeker profile {profile.id} for user {request.user_id}")
        return to_job_seeker_profile(profile)

    def get_job_seeker(self, user_id: int) -> JobSeekerProfile:
        profile = self.job_seekers.get_by_user_id(user_id)
        if not profile:
            raise NotFoundException("Profile not found")
        return to_job_seeker_profile(profile)

    def create_recruiter(self, request: RecruiterProfileCreate) -> RecruiterProfile:
        """
        Create a recruiter profile.

        Raises:
            NotFoundException: If the user does not exist.
            ValidationException: If the user is not a recruiter.
            ConflictException: If the user already has a profile.
        """
        self._require_user(request.user_id, 'recruiter')
        if self.recruiters.get_by_user_id(request.user_id):
            raise ConflictException("Recruiter profile already exists")

        recruiter = self.recruiters.create_profile(
            request.user_id,
            request.model_dump(exclude={'user_id'})
        )
        self.db.commit()
        logger.info(f"Created recruiter profile {recruiter.id} for user {request.user_id}")
        return to_recruiter_profile(recruiter)

    def get_recruiter(self, user_id: int) -> RecruiterProfile:
        recruiter = self.recruiters.get_by_user_id(user_id)
        if not recruiter:
            raise NotFoundException("Profile not found")
        return to_recruiter_profile(recruiter)


def to_job_seeker_profile(profile: JobSeeker) -> JobSeekerProfile:
    """Convert ORM model to JobSeekerProfile response model."""
    return JobSeekerProfile(
        id=profile.id,
        user_id=profile.user_id,
        first_name=profile.first_name,
        last_name=profile.last_name,
        phone=profile.phone,
        location=profile.location,
        title=profile.title,
        bio=profile.bio,
        skills=safe_list(profile.skills),
        experience_years=safe_int(profile.experience_years),
        education=profile.education,
        resume_url=profile.resume_url,
        linkedin_url=profile.linkedin_url,
        github_url=profile.github_url,
        created_at=safe_datetime_iso(profile.created_at),
    )


def to_recruiter_profile(recruiter: Recruiter) -> RecruiterProfile:
    """Convert ORM model to RecruiterProfile response model."""
    return RecruiterProfile(
        id=recruiter.id,
        user_id=recruiter.user_id,
        company_name=recruiter.company_name,
        contact_name=recruiter.contact_name,
        phone=recruiter.phone,
        company_website=recruiter.company_website,
        company_description=recruiter.company_description,
        company_size=recruiter.company_size,
        industry=recruiter.industry,
        created_at=safe_datetime_iso(recruiter.created_at),
    )
