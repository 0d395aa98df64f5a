#!/usr/bin/env python3
"""
Application service - applying to jobs and reviewing applicants.
"""

import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database.models import Application
from database.repositories import (
    ApplicationRepository,
    JobPostRepository,
    JobSeekerRepository,
)
from ..models.requests import ApplicationCreate
from ..models.responses import ApplicationSummary
from ..utils import safe_str, safe_datetime_iso
from ..exceptions import NotFoundException, ConflictException

logger = logging.getLogger(__name__)


class ApplicationService:
    """Service for job applications."""

    def __init__(self, db: Session):
        self.db = db
        self.applications = ApplicationRepository(db)
        self.jobs = JobPostRepository(db)
        self.job_seekers = JobSeekerRepository(db)

    def get_for_job_seeker(self, user_id: int) -> List[ApplicationSummary]:
        """
        Applications made by the job seeker belonging to user_id.

        A user without a seeker profile simply has no applications.
        """
        seeker = self.job_seekers.get_by_user_id(user_id)
        if not seeker:
            return []

        applications = self.applications.get_applications_for_seeker(seeker.id)
        return [self._to_seeker_view(a) for a in applications]

    def get_for_recruiter(self, recruiter_id: int) -> List[ApplicationSummary]:
        applications = self.applications.get_applications_for_recruiter(recruiter_id)
        return [self._to_recruiter_view(a) for a in applications]

    def apply(self, request: ApplicationCreate) -> ApplicationSummary:
        """
        Submit an application and bump the job's application count.

        Raises:
            NotFoundException: If the job is not active or the seeker is unknown.
            ConflictException: If the seeker already applied to this job.
        """
        job = self.jobs.get_active_by_id(request.job_id)
        if not job:
            raise NotFoundException("Job not found or no longer active")

        seeker = self.job_seekers.get_by_id(request.job_seeker_id)
        if not seeker:
            raise NotFoundException("Job seeker profile not found")

        if self.applications.get_existing_application(job.id, seeker.id):
            raise ConflictException("You have already applied to this job")

        try:
            application = self.applications.create_application(
                job_id=job.id,
                job_seeker_id=seeker.id,
                cover_letter=request.cover_letter or ""
            )
            self.jobs.increment_applications_count(job.id)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictException("You have already applied to this job") from e

        logger.info(f"Job seeker {seeker.id} applied to job {job.id}")
        return ApplicationSummary(
            id=application.id,
            job_id=application.job_id,
            job_seeker_id=application.job_seeker_id,
            cover_letter=safe_str(application.cover_letter),
            status=application.status,
            applied_at=safe_datetime_iso(application.applied_at),
            job_title=job.title,
        )

    # Private helper methods

    def _to_seeker_view(self, application: Application) -> ApplicationSummary:
        job = application.job
        return ApplicationSummary(
            id=application.id,
            job_id=application.job_id,
            job_seeker_id=application.job_seeker_id,
            cover_letter=safe_str(application.cover_letter),
            status=application.status,
            applied_at=safe_datetime_iso(application.applied_at),
            job_title=job.title if job else None,
            company_name=job.recruiter.company_name if job and job.recruiter else None,
        )

    def _to_recruiter_view(self, application: Application) -> ApplicationSummary:
        job = application.job
        seeker = application.job_seeker
        return ApplicationSummary(
            id=application.id,
            job_id=application.job_id,
            job_seeker_id=application.job_seeker_id,
            cover_letter=safe_str(application.cover_letter),
            status=application.status,
            applied_at=safe_datetime_iso(application.applied_at),
            job_title=job.title if job else None,
            first_name=seeker.first_name if seeker else None,
            last_name=seeker.last_name if seeker else None,
            candidate_title=seeker.title if seeker else None,
            resume_url=seeker.resume_url if seeker else None,
        )
