from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, JSON

from app.core.timezone_utils import utc_now
from app.db.base_class import Base


class Facility(Base):
    """Instalaciones del gimnasio (piscina, sala de pesas, sauna...)"""
    __tablename__ = "facilities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)


class GymInfo(Base):
    """Datos generales del gimnasio. Tabla con un único registro."""
    __tablename__ = "gym_info"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    operating_hours = Column(JSON, nullable=False)  # {"monday": "06:00-22:00", ...}
    description = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
