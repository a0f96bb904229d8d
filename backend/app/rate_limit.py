from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import get_settings


def build_limiter(rate: str) -> Limiter:
    """Limiter keyed on client address applying `rate` to every route."""
    return Limiter(key_func=get_remote_address, default_limits=[rate])


# Global limiter instance reused across the app
limiter = build_limiter(get_settings().RATE_LIMIT)
