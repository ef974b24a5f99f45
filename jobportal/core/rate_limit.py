"""
Rate limiting configuration using slowapi.

Only the unauthenticated auth endpoints are limited, so the key is the
client IP.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from jobportal.core.config import settings


limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"           # login and register
