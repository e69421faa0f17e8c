from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, EmailStr, Field


class TrainerBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    specialization: str
    bio: str
    hourly_rate: Decimal = Field(..., ge=0, max_digits=8, decimal_places=2)
    is_available: bool = True
    image_url: Optional[str] = None


class TrainerCreate(TrainerBase):
    pass


class Trainer(TrainerBase):
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}
