"""Business logic services for the web application."""

from .auth_service import AuthService
from .profile_service import ProfileService
from .job_service import JobService
from .application_service import ApplicationService
from .recommendation_service import RecommendationService
from .upload_service import UploadService

__all__ = [
    'AuthService',
    'ProfileService',
    'JobService',
    'ApplicationService',
    'RecommendationService',
    'UploadService',
]
