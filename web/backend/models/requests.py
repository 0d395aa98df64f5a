#!/usr/bin/env python3
"""
Request models for API endpoints.

Payloads are validated here, before they reach the services, the store
or the scorer. Numeric fields the scorer relies on are non-negative.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Literal, Optional


def _clean_skills(skills: Optional[List[str]]) -> List[str]:
    """Trim skill names and drop blanks, keeping order and repeats."""
    cleaned = []
    for skill in skills or []:
        name = " ".join(skill.split())
        if name:
            cleaned.append(name)
    return cleaned


class RegisterRequest(BaseModel):
    """Request to create a user account."""
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1)
    user_type: Literal["job_seeker", "recruiter"]

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class JobSeekerProfileCreate(BaseModel):
    """Request to create a job seeker profile."""
    user_id: int = Field(..., ge=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    phone: Optional[str] = None
    bio: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience_years: int = Field(default=0, ge=0, le=80)
    education: Optional[str] = None
    resume_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: List[str]) -> List[str]:
        return _clean_skills(v)


class RecruiterProfileCreate(BaseModel):
    """Request to create a recruiter profile."""
    user_id: int = Field(..., ge=1)
    company_name: str = Field(..., min_length=1)
    contact_name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    company_website: Optional[str] = None
    company_description: Optional[str] = None
    company_size: Optional[str] = None
    industry: Optional[str] = None


class JobCreate(BaseModel):
    """Request to publish a job posting."""
    recruiter_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    requirements: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    job_type: str = Field(..., min_length=1, description="e.g. full-time, part-time, contract")
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    experience_required: int = Field(default=0, ge=0, le=80)
    skills_required: List[str] = Field(default_factory=list)

    @field_validator("skills_required")
    @classmethod
    def clean_skills(cls, v: List[str]) -> List[str]:
        return _clean_skills(v)

    @model_validator(mode="after")
    def check_salary_range(self) -> "JobCreate":
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_min > self.salary_max
        ):
            raise ValueError("salary_min must not exceed salary_max")
        return self


class ApplicationCreate(BaseModel):
    """Request to apply to a job."""
    job_id: int = Field(..., ge=1)
    job_seeker_id: int = Field(..., ge=1)
    cover_letter: Optional[str] = ""
