# Importar todos los modelos para que Alembic y create_all los detecten
from app.db.base_class import Base  # noqa
from app.models.user import User  # noqa
from app.models.membership import MembershipTier, UserMembership  # noqa
from app.models.trainer import Trainer  # noqa
from app.models.schedule import GymClass, ClassSchedule, ClassBooking  # noqa
from app.models.personal_training import PersonalTrainingSession  # noqa
from app.models.gym import Facility, GymInfo  # noqa
