from typing import List, Optional, Union
from datetime import date, datetime

from sqlalchemy.orm import Session

from app.core.timezone_utils import day_bounds
from app.models.personal_training import PersonalTrainingSession, SessionStatus
from app.repositories.base import BaseRepository
from app.schemas.personal_training import PersonalTrainingCreate, PersonalTrainingUpdate


class PersonalTrainingRepository(
    BaseRepository[PersonalTrainingSession, PersonalTrainingCreate, PersonalTrainingUpdate]
):
    def get_owned(self, db: Session, *, session_id: int, user_id: int) -> Optional[PersonalTrainingSession]:
        """Obtener una sesión sólo si pertenece al usuario indicado"""
        return db.query(PersonalTrainingSession).filter(
            PersonalTrainingSession.id == session_id,
            PersonalTrainingSession.user_id == user_id
        ).first()

    def get_scheduled_for_trainer_on_day(
        self, db: Session, *, trainer_id: int, day: Union[date, datetime]
    ) -> List[PersonalTrainingSession]:
        """
        Sesiones en estado scheduled de un entrenador para el día natural de `day`.

        Las completadas o canceladas no ocupan franja.
        """
        start_of_day, next_day = day_bounds(day)
        return db.query(PersonalTrainingSession).filter(
            PersonalTrainingSession.trainer_id == trainer_id,
            PersonalTrainingSession.session_date >= start_of_day,
            PersonalTrainingSession.session_date < next_day,
            PersonalTrainingSession.status == SessionStatus.SCHEDULED
        ).order_by(PersonalTrainingSession.start_time).all()

    def get_by_user(self, db: Session, *, user_id: int) -> List[PersonalTrainingSession]:
        """Sesiones de un usuario ordenadas por fecha y hora de inicio"""
        return db.query(PersonalTrainingSession).filter(
            PersonalTrainingSession.user_id == user_id
        ).order_by(
            PersonalTrainingSession.session_date.asc(),
            PersonalTrainingSession.start_time.asc(),
            PersonalTrainingSession.id.asc()
        ).all()


personal_training_repository = PersonalTrainingRepository(PersonalTrainingSession)
