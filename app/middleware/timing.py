import time
import logging
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger("timing_middleware")

# Umbrales en milisegundos para categorizar la respuesta
MEDIUM_THRESHOLD_MS = 300
SLOW_THRESHOLD_MS = 700
VERY_SLOW_THRESHOLD_MS = 1500


def speed_category(process_time_ms: float) -> str:
    if process_time_ms > VERY_SLOW_THRESHOLD_MS:
        return "VERY_SLOW"
    if process_time_ms > SLOW_THRESHOLD_MS:
        return "SLOW"
    if process_time_ms > MEDIUM_THRESHOLD_MS:
        return "MEDIUM"
    return "FAST"


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware que mide el tiempo de respuesta de cada solicitud y añade
    información de diagnóstico en cabeceras.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.time()
        method = request.method
        path = request.url.path

        response = await call_next(request)

        process_time = (time.time() - start_time) * 1000  # En milisegundos
        category = speed_category(process_time)

        if category == "VERY_SLOW":
            logger.warning(f"Petición muy lenta {method}:{path}: {process_time:.2f}ms")

        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        response.headers["X-Process-Speed"] = category
        return response
