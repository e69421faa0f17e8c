from typing import List, Union
from datetime import date, datetime
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, InvalidStateError
from app.core.timezone_utils import hourly_slots
from app.models.trainer import Trainer
from app.repositories.personal_training import personal_training_repository
from app.repositories.trainer import trainer_repository

logger = logging.getLogger(__name__)

# Horario de atención para entrenamiento personal: franjas de 09:00 a 20:00
BUSINESS_START_HOUR = 9
BUSINESS_END_HOUR = 20


class TrainerService:
    def get_trainers(self, db: Session) -> List[Trainer]:
        """Entrenadores disponibles para reservar"""
        return trainer_repository.get_available(db)

    def get_trainer_availability(
        self, db: Session, *, trainer_id: int, day: Union[date, datetime]
    ) -> List[str]:
        """
        Franjas horarias ("HH:00") libres de un entrenador en un día.

        Se parte de las franjas de BUSINESS_START_HOUR a BUSINESS_END_HOUR y se
        descartan las que caen dentro de [start_time, end_time) de alguna sesión
        programada ese día. Una sesión de 10:00 a 11:00 sólo retira "10:00".

        Raises:
            NotFoundError: si el entrenador no existe
            InvalidStateError: si el entrenador no acepta reservas
        """
        trainer = trainer_repository.get(db, trainer_id)
        if not trainer:
            raise NotFoundError(f"Trainer with id {trainer_id} not found")

        if not trainer.is_available:
            raise InvalidStateError(f"Trainer with id {trainer_id} is not available")

        scheduled = personal_training_repository.get_scheduled_for_trainer_on_day(
            db, trainer_id=trainer_id, day=day
        )
        # Las horas van en formato "HH:MM" con ceros, así que la comparación léxica es válida
        slots = [
            slot for slot in hourly_slots(BUSINESS_START_HOUR, BUSINESS_END_HOUR)
            if not any(session.start_time <= slot < session.end_time for session in scheduled)
        ]
        logger.debug(f"Entrenador {trainer_id}: {len(slots)} franjas libres el {day}")
        return slots


trainer_service = TrainerService()
