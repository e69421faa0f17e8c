from typing import List, Optional
from datetime import datetime

from sqlalchemy.orm import Session

from app.models.schedule import GymClass, ClassSchedule, ClassBooking, BookingStatus
from app.models.trainer import Trainer
from app.repositories.base import BaseRepository
from app.schemas.schedule import GymClassCreate, ClassScheduleCreate, ClassBookingCreate


class GymClassRepository(BaseRepository[GymClass, GymClassCreate, GymClassCreate]):
    def get_with_instructor(self, db: Session) -> List[GymClass]:
        """Clases cuyo instructor existe (INNER JOIN con trainers)."""
        return db.query(GymClass).join(
            Trainer, GymClass.instructor_id == Trainer.id
        ).order_by(GymClass.id).all()


class ClassScheduleRepository(BaseRepository[ClassSchedule, ClassScheduleCreate, ClassScheduleCreate]):
    def get_in_range(
        self, db: Session, *, start_from: Optional[datetime] = None, start_to: Optional[datetime] = None
    ) -> List[ClassSchedule]:
        """
        Sesiones cuyo start_time cae en [start_from, start_to], ordenadas por inicio.
        Cualquiera de los límites puede omitirse.
        """
        query = db.query(ClassSchedule)
        if start_from is not None:
            query = query.filter(ClassSchedule.start_time >= start_from)
        if start_to is not None:
            query = query.filter(ClassSchedule.start_time <= start_to)
        return query.order_by(ClassSchedule.start_time.asc(), ClassSchedule.id.asc()).all()


class ClassBookingRepository(BaseRepository[ClassBooking, ClassBookingCreate, ClassBookingCreate]):
    def get_owned(self, db: Session, *, booking_id: int, user_id: int) -> Optional[ClassBooking]:
        """Obtener una reserva sólo si pertenece al usuario indicado"""
        return db.query(ClassBooking).filter(
            ClassBooking.id == booking_id,
            ClassBooking.user_id == user_id
        ).first()

    def get_confirmed(self, db: Session, *, user_id: int, schedule_id: int) -> Optional[ClassBooking]:
        """Reserva confirmada del usuario en la sesión, si existe"""
        return db.query(ClassBooking).filter(
            ClassBooking.user_id == user_id,
            ClassBooking.schedule_id == schedule_id,
            ClassBooking.booking_status == BookingStatus.CONFIRMED
        ).first()

    def get_by_user(self, db: Session, *, user_id: int) -> List[ClassBooking]:
        """Todas las reservas de un usuario, las más recientes primero"""
        return db.query(ClassBooking).filter(
            ClassBooking.user_id == user_id
        ).order_by(ClassBooking.booked_at.desc(), ClassBooking.id.desc()).all()


# Instantiate repositories
gym_class_repository = GymClassRepository(GymClass)
class_schedule_repository = ClassScheduleRepository(ClassSchedule)
class_booking_repository = ClassBookingRepository(ClassBooking)
