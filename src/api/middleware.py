"""Per-client rate limiting (slowapi), keyed by remote address."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)


def current_rate_limit() -> str:
    """Limit applied to each ride endpoint, read per request."""
    return settings.rate_limit
