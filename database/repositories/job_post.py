from typing import List, Optional, Dict, Any

from sqlalchemy import select, update, or_
from sqlalchemy.orm import contains_eager

from database.models import JobPost, Recruiter
from database.repositories.base import BaseRepository

JOB_STATUS_ACTIVE = 'active'
JOB_TYPE_ANY = 'all'


class JobPostRepository(BaseRepository):
    def _active_with_recruiter(self):
        return (
            select(JobPost)
            .join(JobPost.recruiter)
            .options(contains_eager(JobPost.recruiter))
            .where(JobPost.status == JOB_STATUS_ACTIVE)
        )

    def get_by_id(self, job_id: int) -> Optional[JobPost]:
        stmt = select(JobPost).where(JobPost.id == job_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_active_by_id(self, job_id: int) -> Optional[JobPost]:
        stmt = select(JobPost).where(
            JobPost.id == job_id,
            JobPost.status == JOB_STATUS_ACTIVE
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create_job_post(self, recruiter_id: int, job_data: Dict[str, Any]) -> JobPost:
        job_post = JobPost(
            recruiter_id=recruiter_id,
            title=job_data['title'],
            description=job_data['description'],
            requirements=job_data['requirements'],
            location=job_data['location'],
            job_type=job_data['job_type'],
            salary_min=job_data.get('salary_min'),
            salary_max=job_data.get('salary_max'),
            experience_required=job_data.get('experience_required') or 0,
            skills_required=list(job_data.get('skills_required') or []),
        )
        return self._add(job_post)

    def search_active(
        self,
        search: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        recruiter_id: Optional[int] = None
    ) -> List[JobPost]:
        """
        List active postings, newest first.

        When recruiter_id is given the other filters are ignored, so a
        recruiter always sees all of their own open postings.
        """
        stmt = self._active_with_recruiter()

        if recruiter_id is not None:
            stmt = stmt.where(JobPost.recruiter_id == recruiter_id)
        else:
            if search:
                pattern = f"%{search}%"
                stmt = stmt.where(or_(
                    JobPost.title.ilike(pattern),
                    Recruiter.company_name.ilike(pattern)
                ))
            if location:
                stmt = stmt.where(JobPost.location.ilike(f"%{location}%"))
            if job_type and job_type != JOB_TYPE_ANY:
                stmt = stmt.where(JobPost.job_type == job_type)

        stmt = stmt.order_by(JobPost.created_at.desc(), JobPost.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_recent_active(self, limit: int = 50) -> List[JobPost]:
        """Newest active postings, used as the recommendation candidate set."""
        stmt = (
            self._active_with_recruiter()
            .order_by(JobPost.created_at.desc(), JobPost.id.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def increment_applications_count(self, job_id: int) -> None:
        stmt = (
            update(JobPost)
            .where(JobPost.id == job_id)
            .values(applications_count=JobPost.applications_count + 1)
        )
        self.db.execute(stmt)
