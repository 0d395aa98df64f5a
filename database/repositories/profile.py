from typing import Optional, Dict, Any

from sqlalchemy import select

from database.models import JobSeeker, Recruiter
from database.repositories.base import BaseRepository


class JobSeekerRepository(BaseRepository):
    def get_by_id(self, job_seeker_id: int) -> Optional[JobSeeker]:
        stmt = select(JobSeeker).where(JobSeeker.id == job_seeker_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_user_id(self, user_id: int) -> Optional[JobSeeker]:
        stmt = select(JobSeeker).where(JobSeeker.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_profile(self, user_id: int, profile_data: Dict[str, Any]) -> JobSeeker:
        profile = JobSeeker(
            user_id=user_id,
            first_name=profile_data['first_name'],
            last_name=profile_data['last_name'],
            phone=profile_data.get('phone'),
            location=profile_data['location'],
            title=profile_data['title'],
            bio=profile_data.get('bio'),
            skills=list(profile_data.get('skills') or []),
            experience_years=profile_data.get('experience_years') or 0,
            education=profile_data.get('education'),
            resume_url=profile_data.get('resume_url'),
            linkedin_url=profile_data.get('linkedin_url'),
            github_url=profile_data.get('github_url'),
        )
        return self._add(profile)

    def update_resume_url(self, user_id: int, resume_url: str) -> bool:
        """Attach an uploaded resume to the user's profile, if they have one."""
        profile = self.get_by_user_id(user_id)
        if not profile:
            return False
        profile.resume_url = resume_url
        return True


class RecruiterRepository(BaseRepository):
    def get_by_id(self, recruiter_id: int) -> Optional[Recruiter]:
        stmt = select(Recruiter).where(Recruiter.id == recruiter_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_user_id(self, user_id: int) -> Optional[Recruiter]:
        stmt = select(Recruiter).where(Recruiter.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_profile(self, user_id: int, profile_data: Dict[str, Any]) -> Recruiter:
        recruiter = Recruiter(
            user_id=user_id,
            company_name=profile_data['company_name'],
            contact_name=profile_data['contact_name'],
            phone=profile_data.get('phone'),
            company_website=profile_data.get('company_website'),
            company_description=profile_data.get('company_description'),
            company_size=profile_data.get('company_size'),
            industry=profile_data.get('industry'),
        )
        return self._add(recruiter)
