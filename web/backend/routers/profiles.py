#!/usr/bin/env python3
"""
Profile endpoints - job seeker and recruiter profiles.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.profile_service import ProfileService
from ..models.requests import JobSeekerProfileCreate, RecruiterProfileCreate
from ..models.responses import JobSeekerProfileResponse, RecruiterProfileResponse

router = APIRouter(prefix="/api/profile", tags=["profiles"])


@router.post("/job-seeker", response_model=JobSeekerProfileResponse)
def create_job_seeker_profile(
    body: JobSeekerProfileCreate,
    db: Session = Depends(get_db)
):
    """Create the job seeker profile for a job_seeker user."""
    profile = ProfileService(db).create_job_seeker(body)
    return JobSeekerProfileResponse(
        success=True,
        message="Job seeker profile created successfully",
        profile=profile
    )


@router.get("/job-seeker", response_model=JobSeekerProfileResponse)
def get_job_seeker_profile(
    user_id: int = Query(..., ge=1, description="User ID of the job seeker"),
    db: Session = Depends(get_db)
):
    profile = ProfileService(db).get_job_seeker(user_id)
    return JobSeekerProfileResponse(success=True, profile=profile)


@router.post("/recruiter", response_model=RecruiterProfileResponse)
def create_recruiter_profile(
    body: RecruiterProfileCreate,
    db: Session = Depends(get_db)
):
    """Create the company profile for a recruiter user."""
    profile = ProfileService(db).create_recruiter(body)
    return RecruiterProfileResponse(
        success=True,
        message="Recruiter profile created successfully",
        profile=profile
    )


@router.get("/recruiter", response_model=RecruiterProfileResponse)
def get_recruiter_profile(
    user_id: int = Query(..., ge=1, description="User ID of the recruiter"),
    db: Session = Depends(get_db)
):
    profile = ProfileService(db).get_recruiter(user_id)
    return RecruiterProfileResponse(success=True, profile=profile)
