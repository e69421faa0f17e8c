from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime, Text, Enum, CheckConstraint
from sqlalchemy.orm import relationship
import enum

from app.core.timezone_utils import utc_now
from app.db.base_class import Base


class ClassDifficultyLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class BookingStatus(str, enum.Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    WAITLIST = "waitlist"


class GymClass(Base):
    """Definición de clases que se ofrecen"""
    __tablename__ = "gym_classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    instructor_id = Column(Integer, ForeignKey("trainers.id"), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    capacity = Column(Integer, nullable=False)
    difficulty_level = Column(
        Enum(ClassDifficultyLevel, name="difficulty_level", values_callable=lambda e: [m.value for m in e]),
        nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relaciones
    instructor = relationship("Trainer", back_populates="gym_classes")
    schedules = relationship("ClassSchedule", back_populates="gym_class")


class ClassSchedule(Base):
    """Instancias concretas en el tiempo de una clase"""
    __tablename__ = "class_schedules"

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, ForeignKey("gym_classes.id"), nullable=False)
    start_time = Column(DateTime(timezone=True), nullable=False, index=True)
    end_time = Column(DateTime(timezone=True), nullable=False)
    room = Column(String, nullable=False)
    available_spots = Column(Integer, nullable=False)  # Plazas libres; sólo baja con reservas confirmadas
    is_cancelled = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relaciones
    gym_class = relationship("GymClass", back_populates="schedules")
    bookings = relationship("ClassBooking", back_populates="schedule")

    __table_args__ = (
        CheckConstraint('available_spots >= 0', name='check_available_spots_non_negative'),
    )


class ClassBooking(Base):
    """Reserva de un usuario en una sesión de clase"""
    __tablename__ = "class_bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    schedule_id = Column(Integer, ForeignKey("class_schedules.id"), nullable=False, index=True)
    booking_status = Column(
        Enum(BookingStatus, name="booking_status", values_callable=lambda e: [m.value for m in e]),
        default=BookingStatus.CONFIRMED,
        nullable=False
    )
    booked_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)

    # Relaciones
    user = relationship("User", back_populates="class_bookings")
    schedule = relationship("ClassSchedule", back_populates="bookings")
