#!/usr/bin/env python3
"""
Auth endpoints - account registration.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..rate_limit import limiter, register_limit
from ..services.auth_service import AuthService
from ..models.requests import RegisterRequest
from ..models.responses import RegisterResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse)
@limiter.limit(register_limit)
def register(
    request: Request,
    body: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a job seeker or recruiter account.

    Returns 409 if the email is already registered.
    """
    service = AuthService(db)
    user = service.register(body)

    return RegisterResponse(
        success=True,
        message="User created successfully",
        user=user
    )
