from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import contains_eager

from database.models import Application, JobPost, JobSeeker
from database.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository):
    def get_existing_application(self, job_id: int, job_seeker_id: int) -> Optional[Application]:
        stmt = select(Application).where(
            Application.job_id == job_id,
            Application.job_seeker_id == job_seeker_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create_application(self, job_id: int, job_seeker_id: int, cover_letter: str = "") -> Application:
        application = Application(
            job_id=job_id,
            job_seeker_id=job_seeker_id,
            cover_letter=cover_letter or ""
        )
        return self._add(application)

    def get_applications_for_seeker(self, job_seeker_id: int) -> List[Application]:
        """Applications a seeker has made, with job and company loaded."""
        stmt = (
            select(Application)
            .join(Application.job)
            .join(JobPost.recruiter)
            .options(contains_eager(Application.job).contains_eager(JobPost.recruiter))
            .where(Application.job_seeker_id == job_seeker_id)
            .order_by(Application.applied_at.desc(), Application.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_applications_for_recruiter(self, recruiter_id: int) -> List[Application]:
        """Applications to any of a recruiter's postings, with candidate loaded."""
        stmt = (
            select(Application)
            .join(Application.job)
            .join(Application.job_seeker)
            .options(
                contains_eager(Application.job),
                contains_eager(Application.job_seeker)
            )
            .where(JobPost.recruiter_id == recruiter_id)
            .order_by(Application.applied_at.desc(), Application.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())
