from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.profile import JobSeekerRepository, RecruiterRepository
from database.repositories.job_post import JobPostRepository
from database.repositories.application import ApplicationRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'JobSeekerRepository',
    'RecruiterRepository',
    'JobPostRepository',
    'ApplicationRepository',
]
