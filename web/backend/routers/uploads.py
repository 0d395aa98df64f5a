#!/usr/bin/env python3
"""
Upload endpoints - resume files.
"""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from core.storage import BlobStore
from ..dependencies import get_db, get_blob_store, get_app_config
from ..rate_limit import limiter, upload_limit
from ..services.upload_service import UploadService
from ..models.responses import ResumeUploadResponse

router = APIRouter(prefix="/api/upload", tags=["uploads"])


@router.post("/resume", response_model=ResumeUploadResponse)
@limiter.limit(upload_limit)
def upload_resume(
    request: Request,
    file: UploadFile = File(...),
    user_id: int = Form(..., ge=1),
    db: Session = Depends(get_db),
    blob_store: BlobStore = Depends(get_blob_store),
    config: AppConfig = Depends(get_app_config)
):
    """
    Upload a resume (PDF only, 5MB max by default).

    Returns the URL of the stored file.
    """
    content = file.file.read()

    service = UploadService(blob_store, config.uploads, db=db)
    url = service.upload_resume(
        user_id=user_id,
        filename=file.filename or "",
        content_type=file.content_type,
        content=content
    )

    return ResumeUploadResponse(
        success=True,
        message="Resume uploaded successfully",
        url=url
    )
