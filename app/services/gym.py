from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.gym import Facility, GymInfo
from app.repositories.gym import facility_repository, gym_info_repository


class GymService:
    """Información pública del gimnasio: instalaciones y datos de contacto"""

    def get_facilities(self, db: Session) -> List[Facility]:
        return facility_repository.get_active(db)

    def get_gym_info(self, db: Session) -> Optional[GymInfo]:
        return gym_info_repository.get_first(db)


gym_service = GymService()
