from typing import List
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

from app.models.membership import MembershipStatus


# === Planes de membresía ===

class MembershipTierBase(BaseModel):
    """Esquema base para planes de membresía"""
    name: str = Field(..., min_length=1, description="Nombre del plan")
    description: str = Field(..., description="Descripción del plan")
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Precio del plan")
    duration_months: int = Field(..., gt=0, description="Duración en meses de calendario")
    features: List[str] = Field(default_factory=list, description="Características incluidas")
    is_active: bool = Field(True, description="Si el plan se puede contratar")


class MembershipTierCreate(MembershipTierBase):
    pass


class MembershipTier(MembershipTierBase):
    id: int
    created_at: datetime

    model_config = {"from_attributes": True}


# === Membresías de usuario ===

class UserMembershipCreate(BaseModel):
    user_id: int
    membership_tier_id: int
    start_date: datetime = Field(..., description="Inicio de la membresía")


class UserMembership(BaseModel):
    id: int
    user_id: int
    membership_tier_id: int
    start_date: datetime
    end_date: datetime
    status: MembershipStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
