from sqlalchemy import (
    Column, Integer, String, ForeignKey, DateTime, Boolean, Text, Numeric, JSON, Enum, CheckConstraint
)
from sqlalchemy.orm import relationship
import enum

from app.core.timezone_utils import utc_now
from app.db.base_class import Base


class MembershipStatus(str, enum.Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class MembershipTier(Base):
    """
    Planes de membresía del catálogo.
    La duración se expresa en meses de calendario completos.
    """
    __tablename__ = "membership_tiers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    duration_months = Column(Integer, nullable=False)
    features = Column(JSON, nullable=False, default=list)  # Lista de strings
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relaciones
    user_memberships = relationship("UserMembership", back_populates="membership_tier")

    __table_args__ = (
        CheckConstraint('price > 0', name='check_tier_price_positive'),
        CheckConstraint('duration_months > 0', name='check_tier_duration_positive'),
    )

    def __repr__(self):
        return f"<MembershipTier(id={self.id}, name='{self.name}', months={self.duration_months})>"


class UserMembership(Base):
    """Membresía adquirida por un usuario para un plan concreto."""
    __tablename__ = "user_memberships"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    membership_tier_id = Column(Integer, ForeignKey("membership_tiers.id"), nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(
        Enum(MembershipStatus, name="membership_status", values_callable=lambda e: [m.value for m in e]),
        default=MembershipStatus.ACTIVE,
        nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relaciones
    user = relationship("User", back_populates="memberships")
    membership_tier = relationship("MembershipTier", back_populates="user_memberships")

    def __repr__(self):
        return f"<UserMembership(id={self.id}, user_id={self.user_id}, status={self.status})>"
