#!/usr/bin/env python3
"""
Auth service - account registration.
"""

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from database.models import User
from database.repositories import UserRepository
from ..models.requests import RegisterRequest
from ..models.responses import UserSummary
from ..utils import safe_datetime_iso
from ..exceptions import ConflictException

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return generate_password_hash(password)


class AuthService:
    """Service for creating user accounts."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def register(self, request: RegisterRequest) -> UserSummary:
        """
        Create a user account.

        Raises:
            ConflictException: If the email is already registered.
        """
        if self.users.email_exists(request.email):
            raise ConflictException("User with this email already exists")

        try:
            user = self.users.create_user(
                email=request.email,
                password_hash=hash_password(request.password),
                user_type=request.user_type
            )
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise ConflictException("User with this email already exists") from e

        logger.info(f"Registered {user.user_type} user {user.id}")
        return self._to_user_summary(user)

    def _to_user_summary(self, user: User) -> UserSummary:
        return UserSummary(
            id=user.id,
            email=user.email,
            user_type=user.user_type,
            created_at=safe_datetime_iso(user.created_at)
        )
