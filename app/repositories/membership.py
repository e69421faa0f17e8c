from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.membership import MembershipTier, UserMembership, MembershipStatus
from app.repositories.base import BaseRepository
from app.schemas.membership import MembershipTierCreate, UserMembershipCreate


class MembershipTierRepository(BaseRepository[MembershipTier, MembershipTierCreate, MembershipTierCreate]):
    def get_all_newest_first(self, db: Session) -> List[MembershipTier]:
        """Todos los planes, del más reciente al más antiguo."""
        return db.query(MembershipTier).order_by(
            MembershipTier.created_at.desc(), MembershipTier.id.desc()
        ).all()


class UserMembershipRepository(BaseRepository[UserMembership, UserMembershipCreate, UserMembershipCreate]):
    def get_current_active(self, db: Session, *, user_id: int) -> Optional[UserMembership]:
        """
        Membresía activa creada más recientemente para el usuario.

        Se basa únicamente en el campo status almacenado, no en las fechas.
        """
        return db.query(UserMembership).filter(
            UserMembership.user_id == user_id,
            UserMembership.status == MembershipStatus.ACTIVE
        ).order_by(
            UserMembership.created_at.desc(), UserMembership.id.desc()
        ).first()


membership_tier_repository = MembershipTierRepository(MembershipTier)
user_membership_repository = UserMembershipRepository(UserMembership)
