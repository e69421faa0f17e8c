import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

# Importar la función de configuración de logging
from app.core.logging_config import setup_logging

# Llamar a la configuración de logging ANTES de importar/crear otros elementos
setup_logging()

# Ahora importar el resto
from app.api.v1.api import api_router
from app.core.config import get_settings
from app.core.exceptions import GymBookingError
from app.middleware.timing import TimingMiddleware
from app.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

logger = logging.getLogger(__name__)

# Obtener la instancia de configuración al inicio del módulo
settings_instance = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan: Startup iniciado...")

    # En desarrollo con SQLite las tablas se crean al arrancar; en PostgreSQL usar alembic
    if settings_instance.is_sqlite:
        from app.create_tables import create_tables
        create_tables()
        logger.info("Lifespan: Tablas SQLite verificadas.")

    yield  # Aplicación en ejecución

    logger.info("Lifespan: Shutdown iniciado...")


app = FastAPI(
    title=settings_instance.PROJECT_NAME,
    description=settings_instance.PROJECT_DESCRIPTION,
    version=settings_instance.VERSION,
    openapi_url=f"{settings_instance.API_V1_STR}/openapi.json",
    docs_url=f"{settings_instance.API_V1_STR}/docs",
    redoc_url=f"{settings_instance.API_V1_STR}/redoc",
    lifespan=lifespan
)

# Configurar rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


async def gym_booking_error_handler(request: Request, exc: GymBookingError) -> JSONResponse:
    """Traduce los errores de negocio a respuestas HTTP"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.error_code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.error_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.error_code}
    )


app.add_exception_handler(GymBookingError, gym_booking_error_handler)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Middleware: Recibida petición: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Middleware: Enviando respuesta: {response.status_code}")
    return response


# Añadir middleware para medir el tiempo de respuesta
app.add_middleware(TimingMiddleware)

# Límite por defecto para todas las rutas
app.add_middleware(SlowAPIMiddleware)

# Configurar CORS para toda la aplicación
origins = settings_instance.BACKEND_CORS_ORIGINS or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=86400,  # 24 horas en segundos
)

# Incluir routers
app.include_router(api_router, prefix=settings_instance.API_V1_STR)


# Ruta raíz
@app.get("/")
def root():
    return {
        "message": "Bienvenido a la API de reservas del gimnasio",
        "docs": f"{settings_instance.API_V1_STR}/docs",
    }


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings_instance.DEBUG_MODE)
