from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.core.timezone_utils import utc_now
from app.db.base_class import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)

    # Campos de auditoría
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relaciones
    memberships = relationship("UserMembership", back_populates="user")
    class_bookings = relationship("ClassBooking", back_populates="user")
    personal_training_sessions = relationship("PersonalTrainingSession", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
