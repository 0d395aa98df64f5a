#!/usr/bin/env python3
"""
Upload service - resume uploads to the blob store.
"""

import logging
import time
from typing import Optional
from sqlalchemy.orm import Session
from werkzeug.utils import secure_filename

from core.config_loader import UploadConfig
from core.storage import BlobStore, BlobStoreError
from database.repositories import JobSeekerRepository
from ..exceptions import ValidationException, ServiceException

logger = logging.getLogger(__name__)


def safe_filename(filename: str) -> str:
    """Reduce a client filename to URL- and path-safe ASCII."""
    return secure_filename(filename) or "resume.pdf"


class UploadService:
    """Service for storing resume files."""

    def __init__(
        self,
        blob_store: BlobStore,
        config: UploadConfig,
        db: Optional[Session] = None
    ):
        self.blob_store = blob_store
        self.config = config
        self.db = db

    def upload_resume(
        self,
        user_id: int,
        filename: str,
        content_type: Optional[str],
        content: bytes
    ) -> str:
        """
        Validate and store a resume, returning its URL.

        When a session is available and the user has a seeker profile, the
        profile's resume_url is updated to the new file.

        Raises:
            ValidationException: Wrong content type, empty or oversized file.
            ServiceException: If the blob store rejects the file.
        """
        if content_type not in self.config.allowed_content_types:
            raise ValidationException("Only PDF files are allowed")

        if len(content) == 0:
            raise ValidationException("Empty file")

        if len(content) > self.config.max_size_bytes:
            limit_mb = self.config.max_size_bytes // (1024 * 1024)
            raise ValidationException(f"File size must be less than {limit_mb}MB")

        key = f"resumes/{user_id}-{int(time.time() * 1000)}-{safe_filename(filename)}"
        try:
            url = self.blob_store.put(key, content, content_type)
        except BlobStoreError as e:
            raise ServiceException(f"Failed to store resume: {e}") from e

        if self.db is not None:
            if JobSeekerRepository(self.db).update_resume_url(user_id, url):
                self.db.commit()
                logger.info(f"Attached resume to profile of user {user_id}")

        return url
