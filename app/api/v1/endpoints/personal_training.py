from typing import Any, List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.personal_training import (
    PersonalTrainingSession, PersonalTrainingCreate, PersonalTrainingUpdate
)
from app.services.personal_training import personal_training_service

router = APIRouter()


@router.post("", response_model=PersonalTrainingSession, status_code=status.HTTP_201_CREATED)
def book_personal_training(
    session_in: PersonalTrainingCreate,
    db: Session = Depends(get_db)
) -> Any:
    """
    Book Personal Training

    The price is the trainer's hourly rate prorated to the session length.

    Raises:
        HTTPException 400: end_time is not after start_time.
        HTTPException 404: User or trainer not found.
        HTTPException 409: Trainer not available, or overlapping session.
    """
    return personal_training_service.book_personal_training(
        db,
        user_id=session_in.user_id,
        trainer_id=session_in.trainer_id,
        session_date=session_in.session_date,
        start_time=session_in.start_time,
        end_time=session_in.end_time,
        notes=session_in.notes
    )


@router.put("/{session_id}", response_model=PersonalTrainingSession)
def update_personal_training(
    update_in: PersonalTrainingUpdate,
    session_id: int = Path(..., description="ID of the session"),
    db: Session = Depends(get_db)
) -> Any:
    """
    Update Personal Training Session

    Only `status` and `notes` present in the body are written.

    Raises:
        HTTPException 404: Session not found or owned by another user.
    """
    return personal_training_service.update_personal_training(
        db, session_id=session_id, user_id=update_in.user_id, update_in=update_in
    )


@router.get("/user/{user_id}", response_model=List[PersonalTrainingSession])
def get_user_sessions(
    user_id: int = Path(..., description="ID of the user"),
    db: Session = Depends(get_db)
) -> Any:
    return personal_training_service.get_user_personal_training_sessions(db, user_id=user_id)
