"""
Schemas para el endpoint de estado del servicio.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class HealthCheck(BaseModel):
    status: str = Field(..., description="'ok' si la API y la base de datos responden")
    timestamp: datetime = Field(..., description="Instante de la comprobación (UTC)")
    database: str = Field("ok", description="Estado de la conexión a la base de datos")
