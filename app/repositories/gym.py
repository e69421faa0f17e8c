from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.gym import Facility, GymInfo
from app.repositories.base import BaseRepository
from app.schemas.gym import Facility as FacilitySchema, GymInfo as GymInfoSchema


class FacilityRepository(BaseRepository[Facility, FacilitySchema, FacilitySchema]):
    def get_active(self, db: Session) -> List[Facility]:
        return db.query(Facility).filter(Facility.is_active.is_(True)).order_by(Facility.id).all()


class GymInfoRepository(BaseRepository[GymInfo, GymInfoSchema, GymInfoSchema]):
    def get_first(self, db: Session) -> Optional[GymInfo]:
        """La tabla gym_info guarda un único registro"""
        return db.query(GymInfo).order_by(GymInfo.id).first()


facility_repository = FacilityRepository(Facility)
gym_info_repository = GymInfoRepository(GymInfo)
