#!/usr/bin/env python3
"""
Application endpoints - apply to jobs and review applicants.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.application_service import ApplicationService
from ..models.requests import ApplicationCreate
from ..models.responses import ApplicationsResponse, ApplicationCreateResponse

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.get("", response_model=ApplicationsResponse)
def get_applications(
    user_id: Optional[int] = Query(default=None, ge=1, description="Job seeker's user ID"),
    recruiter_id: Optional[int] = Query(default=None, ge=1, description="Recruiter ID"),
    db: Session = Depends(get_db)
):
    """
    List applications.

    With user_id: the seeker's own applications (job title, company).
    With recruiter_id: applicants to the recruiter's postings.
    """
    service = ApplicationService(db)

    if user_id is not None:
        applications = service.get_for_job_seeker(user_id)
    elif recruiter_id is not None:
        applications = service.get_for_recruiter(recruiter_id)
    else:
        raise HTTPException(status_code=400, detail="User ID or Recruiter ID is required")

    return ApplicationsResponse(
        success=True,
        count=len(applications),
        applications=applications
    )


@router.post("", response_model=ApplicationCreateResponse)
def submit_application(
    body: ApplicationCreate,
    db: Session = Depends(get_db)
):
    """Apply to an active job. Returns 409 on a repeat application."""
    application = ApplicationService(db).apply(body)
    return ApplicationCreateResponse(
        success=True,
        message="Application submitted successfully",
        application=application
    )
