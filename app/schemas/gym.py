from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr


class Facility(BaseModel):
    id: int
    name: str
    description: str
    image_url: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class OperatingHours(BaseModel):
    monday: str
    tuesday: str
    wednesday: str
    thursday: str
    friday: str
    saturday: str
    sunday: str


class GymInfo(BaseModel):
    id: int
    name: str
    address: str
    phone: str
    email: EmailStr
    operating_hours: OperatingHours
    description: Optional[str] = None
    updated_at: datetime

    model_config = {"from_attributes": True}
