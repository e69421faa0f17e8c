from typing import Any, List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.schedule import (
    GymClass, ClassSchedule, ClassScheduleFilter,
    ClassBooking, ClassBookingCreate, ClassBookingCancel
)
from app.services.schedule import gym_class_service, class_schedule_service, class_booking_service

router = APIRouter()


@router.get("/classes", response_model=List[GymClass])
def get_classes(db: Session = Depends(get_db)) -> Any:
    """
    Get Class Definitions

    Retrieves the class definitions that have an existing instructor.
    """
    return gym_class_service.get_gym_classes(db)


@router.get("", response_model=List[ClassSchedule])
def get_schedule(
    filters: ClassScheduleFilter = Depends(),
    db: Session = Depends(get_db)
) -> Any:
    """
    Get Class Schedule

    Without filters, returns upcoming sessions. `date_to` includes the whole day.

    Args:
        filters: Optional `date_from` / `date_to` query parameters.
        db (Session, optional): Database session dependency.

    Returns:
        List[ClassSchedule]: Sessions ordered by start time.
    """
    return class_schedule_service.get_class_schedule(
        db, date_from=filters.date_from, date_to=filters.date_to
    )


@router.post("/bookings", response_model=ClassBooking, status_code=status.HTTP_201_CREATED)
def book_class(
    booking_in: ClassBookingCreate,
    db: Session = Depends(get_db)
) -> Any:
    """
    Book a Class Session

    Confirms a seat when one is left, otherwise places the user on the waitlist.

    Raises:
        HTTPException 404: User not found, or session not found or cancelled.
        HTTPException 409: User already holds a confirmed booking for the session.
    """
    return class_booking_service.book_class(
        db, user_id=booking_in.user_id, schedule_id=booking_in.schedule_id
    )


@router.post("/bookings/cancel", response_model=ClassBooking)
def cancel_booking(
    cancel_in: ClassBookingCancel,
    db: Session = Depends(get_db)
) -> Any:
    """
    Cancel a Class Booking

    Raises:
        HTTPException 404: Booking not found or owned by another user.
        HTTPException 409: Booking already cancelled.
    """
    return class_booking_service.cancel_class_booking(
        db, booking_id=cancel_in.booking_id, user_id=cancel_in.user_id
    )


@router.get("/bookings/user/{user_id}", response_model=List[ClassBooking])
def get_user_bookings(
    user_id: int = Path(..., description="ID of the user"),
    db: Session = Depends(get_db)
) -> Any:
    return class_booking_service.get_user_class_bookings(db, user_id=user_id)
