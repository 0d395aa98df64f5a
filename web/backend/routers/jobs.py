#!/usr/bin/env python3
"""
Job endpoints - browse and publish job postings.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.job_service import JobService
from ..models.requests import JobCreate
from ..models.responses import JobsResponse, JobCreateResponse

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=JobsResponse)
def list_jobs(
    search: Optional[str] = Query(default=None, description="Match title or company name"),
    location: Optional[str] = Query(default=None, description="Match location"),
    job_type: Optional[str] = Query(default=None, description="Job type, or 'all'"),
    recruiter_id: Optional[int] = Query(default=None, ge=1, description="Only this recruiter's postings"),
    db: Session = Depends(get_db)
):
    """
    Get active job postings, newest first.

    Text filters are case-insensitive substring matches.
    """
    jobs = JobService(db).list_jobs(
        search=search,
        location=location,
        job_type=job_type,
        recruiter_id=recruiter_id
    )
    return JobsResponse(success=True, count=len(jobs), jobs=jobs)


@router.post("", response_model=JobCreateResponse)
def create_job(
    body: JobCreate,
    db: Session = Depends(get_db)
):
    """Publish a new job posting for a recruiter."""
    job = JobService(db).create_job(body)
    return JobCreateResponse(
        success=True,
        message="Job posted successfully",
        job=job
    )
