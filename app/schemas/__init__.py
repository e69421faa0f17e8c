from app.schemas.user import User, UserCreate, UserUpdate
from app.schemas.membership import MembershipTier, MembershipTierCreate, UserMembership, UserMembershipCreate
from app.schemas.trainer import Trainer, TrainerCreate
from app.schemas.schedule import (
    GymClass, GymClassCreate,
    ClassSchedule, ClassScheduleCreate, ClassScheduleFilter,
    ClassBooking, ClassBookingCreate, ClassBookingCancel
)
from app.schemas.personal_training import (
    PersonalTrainingSession, PersonalTrainingCreate, PersonalTrainingUpdate
)
from app.schemas.gym import Facility, GymInfo, OperatingHours
from app.schemas.health import HealthCheck
