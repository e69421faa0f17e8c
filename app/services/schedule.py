from typing import List, Optional
from datetime import datetime
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, InvalidStateError, ConflictError
from app.core.timezone_utils import Clock, end_of_day, utc_now
from app.db.transaction import store_transaction
from app.models.schedule import GymClass, ClassSchedule, ClassBooking, BookingStatus
from app.repositories.schedule import (
    gym_class_repository,
    class_schedule_repository,
    class_booking_repository
)
from app.repositories.user import user_repository

logger = logging.getLogger(__name__)


class GymClassService:
    def get_gym_classes(self, db: Session) -> List[GymClass]:
        """Clases con instructor asignado, ordenadas por ID"""
        return gym_class_repository.get_with_instructor(db)


class ClassScheduleService:
    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    def get_class_schedule(
        self,
        db: Session,
        *,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None
    ) -> List[ClassSchedule]:
        """
        Listar sesiones programadas por fecha de inicio ascendente.

        Sin límites se devuelven las sesiones futuras. date_to incluye el
        día completo (hasta las 23:59:59.999999).
        """
        if date_from is None and date_to is None:
            return class_schedule_repository.get_in_range(db, start_from=self.clock())

        return class_schedule_repository.get_in_range(
            db,
            start_from=date_from,
            start_to=end_of_day(date_to) if date_to is not None else None
        )


class ClassBookingService:
    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    def book_class(self, db: Session, *, user_id: int, schedule_id: int) -> ClassBooking:
        """
        Reservar plaza en una sesión de clase.

        Si quedan plazas la reserva queda confirmada y se descuenta una plaza;
        si no, queda en lista de espera sin tocar el contador. La fila de la
        sesión se bloquea durante la comprobación para que dos reservas
        simultáneas no consuman la misma plaza.

        Raises:
            NotFoundError: usuario inexistente, o sesión inexistente o cancelada
            ConflictError: el usuario ya tiene una reserva confirmada en la sesión
        """
        with store_transaction(db, "book_class"):
            if not user_repository.exists(db, user_id):
                raise NotFoundError(f"User with id {user_id} not found")

            schedule = class_schedule_repository.get_for_update(db, schedule_id)
            if not schedule or schedule.is_cancelled:
                raise NotFoundError(f"Class schedule with id {schedule_id} not found or cancelled")

            if class_booking_repository.get_confirmed(db, user_id=user_id, schedule_id=schedule_id):
                raise ConflictError("User already has a confirmed booking for this class")

            if schedule.available_spots > 0:
                status = BookingStatus.CONFIRMED
                # UPDATE ... SET available_spots = available_spots - 1
                schedule.available_spots = ClassSchedule.available_spots - 1
            else:
                status = BookingStatus.WAITLIST

            booking = class_booking_repository.create(db, obj_in={
                "user_id": user_id,
                "schedule_id": schedule_id,
                "booking_status": status,
                "booked_at": self.clock(),
            }, commit=False)
            db.commit()
            db.refresh(booking)

        logger.info(
            f"Reserva {booking.id} ({status.value}) creada para usuario {user_id} "
            f"en sesión {schedule_id}"
        )
        return booking

    def cancel_class_booking(self, db: Session, *, booking_id: int, user_id: int) -> ClassBooking:
        """
        Cancelar una reserva propia.

        La plaza no se libera ni se promueve a nadie de la lista de espera.

        Raises:
            NotFoundError: la reserva no existe o pertenece a otro usuario
            InvalidStateError: la reserva ya estaba cancelada
        """
        with store_transaction(db, "cancel_class_booking"):
            booking = class_booking_repository.get_owned(db, booking_id=booking_id, user_id=user_id)
            if not booking:
                raise NotFoundError("Class booking not found or does not belong to the user")

            if booking.booking_status == BookingStatus.CANCELLED:
                raise InvalidStateError("Class booking is already cancelled")

            booking = class_booking_repository.update(db, db_obj=booking, obj_in={
                "booking_status": BookingStatus.CANCELLED,
                "cancelled_at": self.clock(),
            })

        logger.info(f"Reserva {booking_id} cancelada por usuario {user_id}")
        return booking

    def get_user_class_bookings(self, db: Session, *, user_id: int) -> List[ClassBooking]:
        return class_booking_repository.get_by_user(db, user_id=user_id)


gym_class_service = GymClassService()
class_schedule_service = ClassScheduleService()
class_booking_service = ClassBookingService()
