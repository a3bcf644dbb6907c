from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from emojid.core.config import settings
import logging

logger = logging.getLogger(__name__)

# In-memory storage; limits are per process
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.DEFAULT_RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)

def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Handler for rate limit exceeded errors.
    Returns the same error shape as the identifier endpoints.
    """
    logger.warning(
        "Rate limit exceeded for IP: %s, Path: %s, Method: %s",
        get_remote_address(request), request.url.path, request.method
    )
    
    retry_after = getattr(exc, 'retry_after', 60)
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error_type": "rate_limit_exceeded",
            "message": "Too many requests. Please try again later.",
            "retry_after": retry_after
        },
        headers={"Retry-After": str(retry_after)}
    )

def create_rate_limit_middleware():
    """
    Return the SlowAPI middleware class, or None when rate limiting is disabled.
    """
    if not settings.RATE_LIMIT_ENABLED:
        logger.info("Rate limiting is disabled in settings")
        return None
    
    logger.info("Rate limiting middleware enabled with in-memory storage")
    return SlowAPIMiddleware
