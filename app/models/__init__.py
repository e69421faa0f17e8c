from app.models.user import User
from app.models.membership import MembershipTier, UserMembership, MembershipStatus
from app.models.trainer import Trainer
from app.models.schedule import GymClass, ClassSchedule, ClassBooking, ClassDifficultyLevel, BookingStatus
from app.models.personal_training import PersonalTrainingSession, SessionStatus
from app.models.gym import Facility, GymInfo
