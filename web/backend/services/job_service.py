#!/usr/bin/env python3
"""
Job service - business logic for listing and publishing job postings.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from database.models import JobPost
from database.repositories import JobPostRepository, RecruiterRepository
from ..models.requests import JobCreate
from ..models.responses import JobSummary
from ..utils import safe_int, optional_int, safe_list, safe_datetime_iso
from ..exceptions import NotFoundException

logger = logging.getLogger(__name__)


class JobService:
    """Service for job postings."""

    def __init__(self, db: Session):
        self.db = db
        self.jobs = JobPostRepository(db)
        self.recruiters = RecruiterRepository(db)

    def list_jobs(
        self,
        search: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        recruiter_id: Optional[int] = None
    ) -> List[JobSummary]:
        """
        Get active job postings, newest first.

        Args:
            search: Case-insensitive substring of the title or company name.
            location: Case-insensitive substring of the location.
            job_type: Exact job type; "all" disables the filter.
            recruiter_id: Only this recruiter's postings (other filters ignored).

        Returns:
            List of job summaries.
        """
        jobs = self.jobs.search_active(
            search=search.strip() if search else None,
            location=location.strip() if location else None,
            job_type=job_type,
            recruiter_id=recruiter_id
        )
        return [to_job_summary(job) for job in jobs]

    def create_job(self, request: JobCreate) -> JobSummary:
        """
        Publish a job posting.

        Raises:
            NotFoundException: If the recruiter does not exist.
        """
        recruiter = self.recruiters.get_by_id(request.recruiter_id)
        if not recruiter:
            raise NotFoundException(f"Recruiter {request.recruiter_id} not found")

        job = self.jobs.create_job_post(
            request.recruiter_id,
            request.model_dump(exclude={'recruiter_id'})
        )
        self.db.commit()
        self.db.refresh(job)

        logger.info(f"Recruiter {recruiter.id} published job {job.id}: {job.title}")
        return to_job_summary(job, company_name=recruiter.company_name)


def to_job_summary(job: JobPost, company_name: Optional[str] = None) -> JobSummary:
    """Convert ORM model to JobSummary response model."""
    if company_name is None and job.recruiter is not None:
        company_name = job.recruiter.company_name

    return JobSummary(
        id=job.id,
        recruiter_id=job.recruiter_id,
        company_name=company_name,
        title=job.title,
        description=job.description,
        requirements=job.requirements,
        location=job.location,
        job_type=job.job_type,
        salary_min=optional_int(job.salary_min),
        salary_max=optional_int(job.salary_max),
        experience_required=safe_int(job.experience_required),
        skills_required=safe_list(job.skills_required),
        status=job.status,
        applications_count=safe_int(job.applications_count),
        created_at=safe_datetime_iso(job.created_at),
    )
