"""Rate limiting middleware for CryptoTrader AI.

Uses slowapi to limit how often a client can trigger webhook calls.
"""

import logging
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request

from app.config import get_settings

logger = logging.getLogger(__name__)


def get_client_identifier(request: Request) -> str:
    """Get rate limit identifier from request.

    One bucket per client address, shared by all of its sessions.
    """
    return get_remote_address(request)


# Create limiter instance
limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=[f"{get_settings().rate_limit_per_minute}/minute"],
)


def get_rate_limit_string(per_minute: int) -> str:
    """Create rate limit string for slowapi."""
    return f"{per_minute}/minute"


def rate_limit_analyze(func):
    """Stricter rate limit for endpoints that call the analysis webhook."""
    settings = get_settings()
    return limiter.limit(get_rate_limit_string(settings.rate_limit_analyze_per_minute))(func)


def rate_limit_sessions(func):
    """Rate limit for session creation, which can evict the oldest sessions."""
    settings = get_settings()
    return limiter.limit(get_rate_limit_string(settings.rate_limit_sessions_per_minute))(func)


# Export RateLimitExceeded for error handling
__all__ = ["limiter", "RateLimitExceeded", "rate_limit_analyze", "rate_limit_sessions"]
