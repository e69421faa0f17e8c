from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, Enum, Numeric, CheckConstraint, Index
from sqlalchemy.orm import relationship
import enum

from app.core.timezone_utils import utc_now
from app.db.base_class import Base


class SessionStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PersonalTrainingSession(Base):
    """Sesión de entrenamiento personal entre un usuario y un entrenador"""
    __tablename__ = "personal_training_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id"), nullable=False)
    session_date = Column(DateTime(timezone=True), nullable=False)
    start_time = Column(String(5), nullable=False)  # "HH:MM"
    end_time = Column(String(5), nullable=False)  # "HH:MM"
    status = Column(
        Enum(SessionStatus, name="session_status", values_callable=lambda e: [m.value for m in e]),
        default=SessionStatus.SCHEDULED,
        nullable=False
    )
    notes = Column(Text, nullable=True)
    price = Column(Numeric(8, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relaciones
    user = relationship("User", back_populates="personal_training_sessions")
    trainer = relationship("Trainer", back_populates="personal_training_sessions")

    __table_args__ = (
        CheckConstraint('price >= 0', name='check_session_price_non_negative'),
        Index('ix_pt_sessions_trainer_date_status', 'trainer_id', 'session_date', 'status'),
    )
