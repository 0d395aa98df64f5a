#!/usr/bin/env python3
"""
Job Board API - FastAPI Application

Accounts, profiles, job postings, applications, resume uploads and
ranked job recommendations for job seekers.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.app_context import AppContext
from core.config_loader import AppConfig, get_config
from .exceptions import register_exception_handlers
from .rate_limit import add_rate_limit_handlers
from .routers import (
    auth_router,
    profiles_router,
    jobs_router,
    applications_router,
    recommendations_router,
    uploads_router,
    health_router
)

logger = logging.getLogger(__name__)


def create_app(
    context: Optional[AppContext] = None,
    config: Optional[AppConfig] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        context: Pre-built context. When omitted, the lifespan builds one
            from config (default: config.yaml) and owns its database
            connection.
    """
    if context is not None:
        config = context.config
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = context is None
        ctx = AppContext.build(config).open() if owned else context
        if not ctx.database.is_open:
            ctx.database.open()
        app.state.context = ctx
        logger.info("Application context ready")
        try:
            yield
        finally:
            if owned:
                ctx.close()
                logger.info("Application context closed")

    app = FastAPI(
        title="Job Board API",
        description="API for job postings, applications and job recommendations",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    if context is not None:
        app.state.context = context

    add_rate_limit_handlers(app, config.rate_limits)
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(profiles_router)
    app.include_router(jobs_router)
    app.include_router(applications_router)
    app.include_router(recommendations_router)
    app.include_router(uploads_router)
    app.include_router(health_router)

    # Stored resumes are served back under the configured base URL path
    app.mount(
        "/uploads",
        StaticFiles(directory=config.uploads.storage_dir, check_dir=False),
        name="uploads"
    )

    return app
