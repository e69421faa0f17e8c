"""
Services module for GymBookingAPI

Los servicios implementan la lógica de negocio: validan reglas, coordinan
repositorios y definen los límites de cada transacción.
"""

# servicios disponibles
from app.services.user import user_service
from app.services.membership import membership_service
from app.services.trainer import trainer_service
from app.services.schedule import (
    gym_class_service,
    class_schedule_service,
    class_booking_service
)
from app.services.personal_training import personal_training_service
from app.services.gym import gym_service
