from typing import Optional
from pydantic import BaseModel, Field, model_validator
from datetime import datetime

from app.models.schedule import ClassDifficultyLevel, BookingStatus


# GymClass schemas
class GymClassBase(BaseModel):
    name: str
    description: str
    instructor_id: int
    duration_minutes: int = Field(..., gt=0, description="Duración en minutos")
    capacity: int = Field(..., gt=0)
    difficulty_level: ClassDifficultyLevel


class GymClassCreate(GymClassBase):
    pass


class GymClass(GymClassBase):
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}


# ClassSchedule schemas
class ClassScheduleBase(BaseModel):
    class_id: int
    start_time: datetime
    end_time: datetime
    room: str
    available_spots: int = Field(..., ge=0)
    is_cancelled: bool = False


class ClassScheduleCreate(ClassScheduleBase):
    @model_validator(mode='after')
    def check_end_after_start(self):
        if self.end_time <= self.start_time:
            raise ValueError('end_time debe ser posterior a start_time')
        return self


class ClassSchedule(ClassScheduleBase):
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class ClassScheduleFilter(BaseModel):
    """Filtro opcional por rango de fechas para el listado del horario."""
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


# ClassBooking schemas
class ClassBookingCreate(BaseModel):
    user_id: int
    schedule_id: int


class ClassBookingCancel(BaseModel):
    booking_id: int
    user_id: int


class ClassBooking(BaseModel):
    id: int
    user_id: int
    schedule_id: int
    booking_status: BookingStatus
    booked_at: datetime
    cancelled_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
