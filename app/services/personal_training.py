from typing import List, Optional
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, InvalidStateError, ConflictError, InvalidInputError
from app.core.timezone_utils import Clock, time_to_minutes, utc_now
from app.db.transaction import store_transaction
from app.models.personal_training import PersonalTrainingSession
from app.repositories.personal_training import personal_training_repository
from app.repositories.trainer import trainer_repository
from app.repositories.user import user_repository
from app.schemas.personal_training import PersonalTrainingUpdate

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def calculate_session_price(hourly_rate: Decimal, duration_minutes: int) -> Decimal:
    """Tarifa por hora prorrateada por minutos, redondeada al céntimo"""
    price = Decimal(hourly_rate) * Decimal(duration_minutes) / Decimal(60)
    return price.quantize(CENT, rounding=ROUND_HALF_UP)


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Intervalos semiabiertos [start, end); sesiones contiguas no se solapan"""
    return start_a < end_b and end_a > start_b


class PersonalTrainingService:
    """Reserva y gestión de sesiones de entrenamiento personal"""

    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    def book_personal_training(
        self,
        db: Session,
        *,
        user_id: int,
        trainer_id: int,
        session_date: datetime,
        start_time: str,
        end_time: str,
        notes: Optional[str] = None
    ) -> PersonalTrainingSession:
        """
        Reservar una sesión con un entrenador.

        Las comprobaciones se hacen en este orden: usuario, entrenador,
        disponibilidad del entrenador, coherencia de horas y solapamiento con
        las sesiones programadas del mismo día. La fila del entrenador queda
        bloqueada hasta el commit para que dos reservas solapadas no puedan
        entrar a la vez.

        Raises:
            NotFoundError: usuario o entrenador inexistente
            InvalidStateError: el entrenador no acepta reservas
            InvalidInputError: end_time no es posterior a start_time
            ConflictError: la franja se solapa con otra sesión programada
        """
        with store_transaction(db, "book_personal_training"):
            if not user_repository.exists(db, user_id):
                raise NotFoundError(f"User with id {user_id} not found")

            trainer = trainer_repository.get_for_update(db, trainer_id)
            if not trainer:
                raise NotFoundError(f"Trainer with id {trainer_id} not found")

            if not trainer.is_available:
                raise InvalidStateError(f"Trainer with id {trainer_id} is not available")

            start_minutes = time_to_minutes(start_time)
            end_minutes = time_to_minutes(end_time)
            if end_minutes <= start_minutes:
                raise InvalidInputError("End time must be after start time")

            scheduled = personal_training_repository.get_scheduled_for_trainer_on_day(
                db, trainer_id=trainer_id, day=session_date
            )
            for existing in scheduled:
                if intervals_overlap(
                    start_minutes, end_minutes,
                    time_to_minutes(existing.start_time), time_to_minutes(existing.end_time)
                ):
                    raise ConflictError(
                        f"Trainer already has a session from {existing.start_time} "
                        f"to {existing.end_time} on that day"
                    )

            now = self.clock()
            session = personal_training_repository.create(db, obj_in={
                "user_id": user_id,
                "trainer_id": trainer_id,
                "session_date": session_date,
                "start_time": start_time,
                "end_time": end_time,
                "notes": notes,
                "price": calculate_session_price(trainer.hourly_rate, end_minutes - start_minutes),
                "created_at": now,
                "updated_at": now,
            }, commit=False)
            db.commit()
            db.refresh(session)

        logger.info(
            f"Sesión de entrenamiento {session.id} reservada: usuario {user_id}, "
            f"entrenador {trainer_id}, {start_time}-{end_time}, precio {session.price}"
        )
        return session

    def update_personal_training(
        self, db: Session, *, session_id: int, user_id: int, update_in: PersonalTrainingUpdate
    ) -> PersonalTrainingSession:
        """
        Actualizar estado y/o notas de una sesión propia.

        Sólo se escriben los campos enviados; cualquier transición de estado
        está permitida.

        Raises:
            NotFoundError: la sesión no existe o pertenece a otro usuario
        """
        with store_transaction(db, "update_personal_training"):
            session = personal_training_repository.get_owned(
                db, session_id=session_id, user_id=user_id
            )
            if not session:
                raise NotFoundError("Personal training session not found or does not belong to the user")

            update_data = update_in.model_dump(exclude_unset=True, include={"status", "notes"})
            update_data["updated_at"] = self.clock()
            session = personal_training_repository.update(db, db_obj=session, obj_in=update_data)

        logger.info(f"Sesión de entrenamiento {session_id} actualizada: {sorted(update_data)}")
        return session

    def get_user_personal_training_sessions(
        self, db: Session, *, user_id: int
    ) -> List[PersonalTrainingSession]:
        return personal_training_repository.get_by_user(db, user_id=user_id)


personal_training_service = PersonalTrainingService()
