#!/usr/bin/env python3
"""
Health endpoints - liveness and database connectivity.
"""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from database.database import Database
from ..dependencies import get_database
from ..models.responses import DatabaseStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "jobboard-web"}


@router.get("/api/test-db", response_model=DatabaseStatusResponse)
def test_database_connection(database: Database = Depends(get_database)):
    """Run a trivial query against the store."""
    try:
        database.ping()
    except (SQLAlchemyError, RuntimeError) as e:
        logger.error(f"Database connection test failed: {e}")
        return JSONResponse(
            status_code=500,
            content=DatabaseStatusResponse(
                status="error",
                message="Database connection failed",
                error=str(e)
            ).model_dump()
        )

    return DatabaseStatusResponse(
        status="success",
        message="Database connection successful",
        timestamp=datetime.now(timezone.utc).isoformat()
    )
