from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from app.core.timezone_utils import normalize_hhmm
from app.models.personal_training import SessionStatus

# Acepta "9:00" y "09:00"; el validador lo normaliza a "09:00"
TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


class PersonalTrainingCreate(BaseModel):
    user_id: int
    trainer_id: int
    session_date: datetime = Field(..., description="Día de la sesión")
    start_time: str = Field(..., pattern=TIME_PATTERN, description="Hora de inicio HH:MM")
    end_time: str = Field(..., pattern=TIME_PATTERN, description="Hora de fin HH:MM")
    notes: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def pad_time(cls, v: str) -> str:
        return normalize_hhmm(v)


class PersonalTrainingUpdate(BaseModel):
    """
    Sólo se aplican los campos presentes en la petición.
    `notes: null` borra las notas; omitirlo las conserva.
    """
    user_id: int
    status: Optional[SessionStatus] = None
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, v: Optional[SessionStatus]) -> SessionStatus:
        # Sólo se ejecuta si el campo viene en la petición; status no admite null
        if v is None:
            raise ValueError("status cannot be null")
        return v


class PersonalTrainingSession(BaseModel):
    id: int
    user_id: int
    trainer_id: int
    session_date: datetime
    start_time: str
    end_time: str
    status: SessionStatus
    notes: Optional[str] = None
    price: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
