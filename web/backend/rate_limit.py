#!/usr/bin/env python3
"""
Rate limiting for abuse-prone endpoints (registration, uploads).

The limiter is shared by all routers; the limit strings are resolved on
each request from the RateLimitConfig the running app was created with.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.config_loader import RateLimitConfig

limiter = Limiter(key_func=get_remote_address)

_active_config = RateLimitConfig()


def register_limit() -> str:
    return _active_config.register_limit


def upload_limit() -> str:
    return _active_config.upload_limit


def add_rate_limit_handlers(app, config: RateLimitConfig):
    """Apply the app's limits and add the 429 exception handler."""
    global _active_config
    _active_config = config
    limiter.enabled = config.enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": f"Rate limit exceeded: {exc.detail}",
            "type": "RateLimitExceeded"
        }
    )
