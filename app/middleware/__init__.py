"""Middleware module for CryptoTrader AI."""

from app.middleware.rate_limit import limiter, RateLimitExceeded

__all__ = ["limiter", "RateLimitExceeded"]
