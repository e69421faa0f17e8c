from fastapi import APIRouter

# Import routers from modules
from app.api.v1.endpoints import users, memberships, trainers, schedule, personal_training, gym, health

api_router = APIRouter()

# Health check
api_router.include_router(health.router, tags=["health"])

# Users module
api_router.include_router(users.router, prefix="/users", tags=["users"])

# Memberships module
api_router.include_router(memberships.router, prefix="/memberships", tags=["memberships"])

# Trainers module
api_router.include_router(trainers.router, prefix="/trainers", tags=["trainers"])

# Schedule module (classes, sessions and bookings)
api_router.include_router(schedule.router, prefix="/schedule", tags=["schedule"])

# Personal training module
api_router.include_router(personal_training.router, prefix="/personal-training", tags=["personal-training"])

# Gym information
api_router.include_router(gym.router, prefix="/gym", tags=["gym"])
