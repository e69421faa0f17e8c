import os
from typing import Any, List, Optional, Union
from functools import lru_cache
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Configurar el logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Permitir campos extra en .env
    )

    # Configuración básica
    API_V1_STR: str = "/api/v1"

    # Información del proyecto
    PROJECT_NAME: str = "GymBookingAPI"
    PROJECT_DESCRIPTION: str = "API con FastAPI para reservas de clases, membresías y entrenamiento personal"
    VERSION: str = "0.1.0"

    # Debug mode
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "False").lower() in ("true", "1", "t")

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Base de datos
    DATABASE_URL: str = "sqlite:///./gym_booking.db"
    SQLALCHEMY_ECHO: bool = False
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    @field_validator("DATABASE_URL", mode="before")
    def ensure_proper_url_format(cls, v: Optional[str]) -> Any:
        """Asegura que DATABASE_URL use el esquema postgresql:// que espera SQLAlchemy."""
        if not v:
            return "sqlite:///./gym_booking.db"
        if v.startswith('postgres://'):
            logger.info("Corrigiendo formato de postgres:// a postgresql://")
            return 'postgresql://' + v[len('postgres://'):]
        return v

    # Logging
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False

    # Rate limiting (slowapi)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_DEFAULT: str = "200 per minute"
    TRUST_PROXY_HEADERS: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    logger.info("Configuración cargada correctamente")
    return settings
