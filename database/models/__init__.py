from .base import Base
from .user import User, USER_TYPES
from .profile import JobSeeker, Recruiter
from .job import JobPost
from .application import Application

__all__ = [
    'Base',
    'User',
    'USER_TYPES',
    'JobSeeker',
    'Recruiter',
    'JobPost',
    'Application',
]
