from typing import List

from sqlalchemy.orm import Session

from app.models.trainer import Trainer
from app.repositories.base import BaseRepository
from app.schemas.trainer import TrainerCreate


class TrainerRepository(BaseRepository[Trainer, TrainerCreate, TrainerCreate]):
    def get_available(self, db: Session) -> List[Trainer]:
        """Entrenadores marcados como disponibles."""
        return db.query(Trainer).filter(Trainer.is_available.is_(True)).order_by(Trainer.id).all()


trainer_repository = TrainerRepository(Trainer)
