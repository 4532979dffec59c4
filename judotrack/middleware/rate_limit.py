"""
Rate limiting con slowapi.

Usa Redis como backend cuando REDIS_URL está configurada y memoria local en
otro caso. El límite por defecto se aplica a todas las rutas a través de
SlowAPIMiddleware.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from judotrack.core.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_identifier(request: Request) -> str:
    """Usuario que actúa si viene X-User-ID; si no, la IP del cliente."""
    user_id = request.headers.get("X-User-ID")
    if user_id:
        return f"user:{user_id}"
    return get_remote_address(request)


if settings.REDIS_URL:
    limiter = Limiter(
        key_func=get_client_identifier,
        storage_uri=settings.REDIS_URL,
        default_limits=[settings.RATE_LIMIT_DEFAULT],
        enabled=settings.RATE_LIMIT_ENABLED,
    )
    logger.info("Rate limiting configurado con backend Redis")
else:
    limiter = Limiter(
        key_func=get_client_identifier,
        default_limits=[settings.RATE_LIMIT_DEFAULT],
        enabled=settings.RATE_LIMIT_ENABLED,
    )
    logger.info("Rate limiting usando memoria local")


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(
        f"Rate limit exceeded para {get_client_identifier(request)} "
        f"en {request.url.path} - Límite: {exc.detail}"
    )
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Demasiadas solicitudes. Intenta nuevamente más tarde.",
            "limit": exc.detail,
        },
    )
