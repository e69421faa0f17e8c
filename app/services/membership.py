from typing import List, Optional
from datetime import datetime
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, InvalidStateError
from app.core.timezone_utils import Clock, add_months, utc_now
from app.db.transaction import store_transaction
from app.models.membership import MembershipTier, UserMembership, MembershipStatus
from app.repositories.membership import membership_tier_repository, user_membership_repository
from app.repositories.user import user_repository
from app.schemas.membership import MembershipTierCreate

logger = logging.getLogger(__name__)


class MembershipService:
    """Servicio para gestionar planes de membresía y membresías de usuarios"""

    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    # === Gestión de Planes de Membresía ===

    def create_membership_tier(self, db: Session, tier_in: MembershipTierCreate) -> MembershipTier:
        """Crear un nuevo plan de membresía"""
        data = tier_in.model_dump()
        data["created_at"] = self.clock()

        with store_transaction(db, "create_membership_tier"):
            tier = membership_tier_repository.create(db, obj_in=data)

        logger.info(f"Plan de membresía creado: {tier.name} (ID: {tier.id})")
        return tier

    def get_membership_tiers(self, db: Session) -> List[MembershipTier]:
        """Obtener todos los planes, del más reciente al más antiguo"""
        return membership_tier_repository.get_all_newest_first(db)

    # === Membresías de Usuario ===

    def create_user_membership(
        self,
        db: Session,
        *,
        user_id: int,
        membership_tier_id: int,
        start_date: datetime
    ) -> UserMembership:
        """
        Contratar un plan para un usuario.

        La fecha de fin se calcula sumando duration_months meses de calendario
        a start_date; si el día no existe en el mes destino se desborda al mes
        siguiente (29/02/2024 + 12 meses = 01/03/2025).

        Raises:
            NotFoundError: si el usuario o el plan no existen
            InvalidStateError: si el plan no está activo
        """
        with store_transaction(db, "create_user_membership"):
            if not user_repository.exists(db, user_id):
                raise NotFoundError(f"User with id {user_id} not found")

            tier = membership_tier_repository.get(db, membership_tier_id)
            if not tier:
                raise NotFoundError(f"Membership tier with id {membership_tier_id} not found")

            if not tier.is_active:
                raise InvalidStateError(f"Membership tier with id {membership_tier_id} is not active")

            now = self.clock()
            membership = user_membership_repository.create(db, obj_in={
                "user_id": user_id,
                "membership_tier_id": membership_tier_id,
                "start_date": start_date,
                "end_date": add_months(start_date, tier.duration_months),
                "status": MembershipStatus.ACTIVE,
                "created_at": now,
                "updated_at": now,
            })

        logger.info(
            f"Membresía {membership.id} creada para usuario {user_id} "
            f"(plan {membership_tier_id}, hasta {membership.end_date})"
        )
        return membership

    def get_user_membership(self, db: Session, *, user_id: int) -> Optional[UserMembership]:
        """Membresía activa más reciente del usuario, o None"""
        return user_membership_repository.get_current_active(db, user_id=user_id)


membership_service = MembershipService()
