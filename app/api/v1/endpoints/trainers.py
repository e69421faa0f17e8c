from datetime import date
from typing import Any, List

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.trainer import Trainer
from app.services.trainer import trainer_service

router = APIRouter()


@router.get("", response_model=List[Trainer])
def list_trainers(db: Session = Depends(get_db)) -> Any:
    """
    Get Available Trainers

    Returns the trainers currently accepting personal training bookings.
    """
    return trainer_service.get_trainers(db)


@router.get("/{trainer_id}/availability", response_model=List[str])
def get_trainer_availability(
    trainer_id: int = Path(..., description="ID of the trainer"),
    day: date = Query(..., alias="date", description="Day to check (YYYY-MM-DD)"),
    db: Session = Depends(get_db)
) -> Any:
    """
    Get Trainer Availability

    Returns the free hourly slots ("HH:00", from 09:00 to 20:00) for the given day.

    Raises:
        HTTPException 404: Trainer not found.
        HTTPException 409: Trainer is not available.
    """
    return trainer_service.get_trainer_availability(db, trainer_id=trainer_id, day=day)
