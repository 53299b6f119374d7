"""Request Rate Limiting"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings


limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


def current_limit() -> str:
    """Read on every request so the limit follows the live settings"""
    return settings.rate_limit
