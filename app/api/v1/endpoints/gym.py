from typing import Any, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.gym import Facility, GymInfo
from app.services.gym import gym_service

router = APIRouter()


@router.get("/facilities", response_model=List[Facility])
def list_facilities(db: Session = Depends(get_db)) -> Any:
    """Instalaciones activas del gimnasio"""
    return gym_service.get_facilities(db)


@router.get("/info", response_model=Optional[GymInfo])
def get_gym_info(db: Session = Depends(get_db)) -> Any:
    """Datos de contacto y horario; null si aún no se han cargado"""
    return gym_service.get_gym_info(db)
