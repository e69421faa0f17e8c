from app.repositories.user import user_repository
from app.repositories.membership import membership_tier_repository, user_membership_repository
from app.repositories.trainer import trainer_repository
from app.repositories.schedule import (
    gym_class_repository,
    class_schedule_repository,
    class_booking_repository
)
from app.repositories.personal_training import personal_training_repository
from app.repositories.gym import facility_repository, gym_info_repository
