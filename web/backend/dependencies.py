#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

Everything is read from app.state, which the application lifespan
populates from an AppContext. Tests can either build their own context
or override these dependencies directly.
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.config_loader import AppConfig
from core.scorer import MatchScorer
from core.storage import BlobStore
from database.database import Database


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_database(request: Request) -> Database:
    return get_context(request).database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from get_database(request).get_session()


def get_scorer(request: Request) -> MatchScorer:
    return get_context(request).scorer


def get_blob_store(request: Request) -> BlobStore:
    return get_context(request).blob_store


def get_app_config(request: Request) -> AppConfig:
    return get_context(request).config
