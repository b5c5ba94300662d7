"""Rate limiting middleware using slowapi."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from audit_trail.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

save_limiter = limiter.limit(settings.save_rate_limit)
