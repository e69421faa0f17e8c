from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, Numeric, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.timezone_utils import utc_now
from app.db.base_class import Base


class Trainer(Base):
    """Entrenadores del gimnasio (instructores de clases y entrenamiento personal)"""
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String, nullable=True)
    specialization = Column(String, nullable=False)
    bio = Column(Text, nullable=False)
    hourly_rate = Column(Numeric(8, 2), nullable=False)
    is_available = Column(Boolean, default=True, nullable=False)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relaciones
    gym_classes = relationship("GymClass", back_populates="instructor")
    personal_training_sessions = relationship("PersonalTrainingSession", back_populates="trainer")

    __table_args__ = (
        CheckConstraint('hourly_rate >= 0', name='check_trainer_hourly_rate_non_negative'),
    )

    def __repr__(self):
        return f"<Trainer(id={self.id}, name='{self.first_name} {self.last_name}')>"
