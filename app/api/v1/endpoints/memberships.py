"""
Endpoints para planes de membresía y membresías de usuarios.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.membership import (
    MembershipTier, MembershipTierCreate, UserMembership, UserMembershipCreate
)
from app.services.membership import membership_service

router = APIRouter()


@router.get("/tiers", response_model=List[MembershipTier])
def list_membership_tiers(db: Session = Depends(get_db)) -> Any:
    """Listar todos los planes, del más reciente al más antiguo"""
    return membership_service.get_membership_tiers(db)


@router.post("/tiers", response_model=MembershipTier, status_code=status.HTTP_201_CREATED)
def create_membership_tier(
    tier_in: MembershipTierCreate,
    db: Session = Depends(get_db)
) -> Any:
    """Crear un nuevo plan de membresía"""
    return membership_service.create_membership_tier(db, tier_in)


@router.post("", response_model=UserMembership, status_code=status.HTTP_201_CREATED)
def create_user_membership(
    membership_in: UserMembershipCreate,
    db: Session = Depends(get_db)
) -> Any:
    """
    Contratar un plan para un usuario.

    La fecha de fin se calcula a partir de start_date y la duración del plan.

    Raises:
        HTTPException: 404 si el usuario o el plan no existen, 409 si el plan está inactivo
    """
    return membership_service.create_user_membership(
        db,
        user_id=membership_in.user_id,
        membership_tier_id=membership_in.membership_tier_id,
        start_date=membership_in.start_date
    )


@router.get("/user/{user_id}", response_model=Optional[UserMembership])
def get_user_membership(
    user_id: int = Path(..., description="ID del usuario"),
    db: Session = Depends(get_db)
) -> Any:
    """Membresía activa más reciente del usuario, o null si no tiene"""
    return membership_service.get_user_membership(db, user_id=user_id)
