"""
Rate Limiting para GymBookingAPI

Limita las peticiones por cliente usando slowapi con almacenamiento en memoria.
El límite por defecto se aplica a todas las rutas vía SlowAPIMiddleware.
"""

import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def get_client_identifier(request: Request) -> str:
    """Obtener identificador único del cliente para rate limiting.

    - Por defecto usa la IP del socket (ASGI client).
    - Si TRUST_PROXY_HEADERS=True, usa el primer IP de X-Forwarded-For cuando existe.
    """
    if get_settings().TRUST_PROXY_HEADERS:
        # X-Forwarded-For: client, proxy1, proxy2 ... -> tomar el primero
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return get_remote_address(request)


def build_limiter() -> Limiter:
    settings = get_settings()
    rate_limiter = Limiter(
        key_func=get_client_identifier,
        default_limits=[settings.RATE_LIMIT_DEFAULT],
        enabled=settings.RATE_LIMIT_ENABLED
    )
    if settings.RATE_LIMIT_ENABLED:
        logger.info(f"Rate limiting en memoria activo: {settings.RATE_LIMIT_DEFAULT}")
    else:
        logger.warning("Rate limiting desactivado")
    return rate_limiter


limiter = build_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handler personalizado para rate limit exceeded"""
    logger.warning(
        f"Rate limit exceeded para {get_client_identifier(request)} "
        f"en {request.url.path} - Límite: {exc.detail}"
    )
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Too many requests. Try again later.",
            "error": "rate_limit_exceeded",
            "limit": exc.detail
        }
    )


__all__ = ["limiter", "rate_limit_exceeded_handler", "get_client_identifier"]
