"""API route handlers."""

from .auth import router as auth_router
from .profiles import router as profiles_router
from .jobs import router as jobs_router
from .applications import router as applications_router
from .recommendations import router as recommendations_router
from .uploads import router as uploads_router
from .health import router as health_router
