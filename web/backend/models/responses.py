#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict


class UserSummary(BaseModel):
    """Public view of a user account."""
    id: int
    email: str
    user_type: str
    created_at: Optional[str]


class RegisterResponse(BaseModel):
    success: bool
    message: str
    user: UserSummary


class JobSeekerProfile(BaseModel):
    id: int
    user_id: int
    first_name: str
    last_name: str
    phone: Optional[str] = None
    location: str
    title: str
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience_years: int = 0
    education: Optional[str] = None
    resume_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    created_at: Optional[str] = None


class JobSeekerProfileResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    profile: JobSeekerProfile


class RecruiterProfile(BaseModel):
    id: int
    user_id: int
    company_name: str
    contact_name: str
    phone: Optional[str] = None
    company_website: Optional[str] = None
    company_description: Optional[str] = None
    company_size: Optional[str] = None
    industry: Optional[str] = None
    created_at: Optional[str] = None


class RecruiterProfileResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    profile: RecruiterProfile


class JobSummary(BaseModel):
    """A job posting with its company name."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 42,
                "recruiter_id": 7,
                "company_name": "TechCorp",
                "title": "Data Analyst",
                "description": "Own our reporting stack.",
                "requirements": "SQL, Python",
                "location": "Seattle, WA",
                "job_type": "full-time",
                "salary_min": 90000,
                "salary_max": 110000,
                "experience_required": 2,
                "skills_required": ["python", "sql"],
                "status": "active",
                "applications_count": 3,
                "created_at": "2026-02-01T12:00:00+00:00"
            }
        }
    )

    id: int
    recruiter_id: int
    company_name: Optional[str] = None
    title: str
    description: str
    requirements: str
    location: str
    job_type: str
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    experience_required: int = 0
    skills_required: List[str] = Field(default_factory=list)
    status: str
    applications_count: int = 0
    created_at: Optional[str] = None


class JobsResponse(BaseModel):
    success: bool
    count: int
    jobs: List[JobSummary]


class JobCreateResponse(BaseModel):
    success: bool
    message: str
    job: JobSummary


class ApplicationSummary(BaseModel):
    """
    An application. Seekers see job_title/company_name; recruiters
    additionally see the candidate fields.
    """
    id: int
    job_id: int
    job_seeker_id: int
    cover_letter: str = ""
    status: str
    applied_at: Optional[str] = None
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    candidate_title: Optional[str] = None
    resume_url: Optional[str] = None


class ApplicationsResponse(BaseModel):
    success: bool
    count: int
    applications: List[ApplicationSummary]


class ApplicationCreateResponse(BaseModel):
    success: bool
    message: str
    application: ApplicationSummary


class Recommendation(JobSummary):
    """A job posting ranked for a job seeker."""
    score: int
    score_components: Dict[str, float] = Field(default_factory=dict)


class RecommendationsResponse(BaseModel):
    success: bool
    count: int
    recommendations: List[Recommendation]
    # Display flag for the ranking strategy; always True for the heuristic scorer
    ai_powered: bool = True


class ResumeUploadResponse(BaseModel):
    success: bool
    message: str
    url: str


class DatabaseStatusResponse(BaseModel):
    status: str
    message: str
    timestamp: Optional[str] = None
    error: Optional[str] = None
