import os

# Configuración de entorno antes de importar la app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import build_engine, get_db
from app.models.schedule import ClassDifficultyLevel
from app.repositories.membership import membership_tier_repository
from app.repositories.schedule import gym_class_repository, class_schedule_repository
from app.repositories.trainer import trainer_repository
from app.repositories.user import user_repository
from main import app

# Instante fijo para los servicios; SQLite devuelve datetimes naive
FIXED_NOW = datetime(2025, 6, 1, 8, 0, 0)


@pytest.fixture(scope="function")
def db_engine():
    """Base de datos SQLite en memoria, nueva para cada test"""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """
    Crea una sesión de base de datos fresca para cada test y la cierra al finalizar.
    """
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """
    Crea un cliente de prueba usando una sesión de base de datos de prueba.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


def make_user(db, email="member@gym.io", first_name="Ana", last_name="García"):
    return user_repository.create(db, obj_in={
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "phone": "+34 600 000 000",
    })


def make_trainer(db, email="coach@gym.io", hourly_rate="75.00", is_available=True):
    return trainer_repository.create(db, obj_in={
        "first_name": "Carlos",
        "last_name": "Ruiz",
        "email": email,
        "specialization": "Fuerza",
        "bio": "Entrenador de fuerza y acondicionamiento",
        "hourly_rate": Decimal(hourly_rate),
        "is_available": is_available,
    })


def make_schedule(db, gym_class, available_spots=2, is_cancelled=False,
                  start_time=datetime(2025, 6, 10, 18, 0), end_time=datetime(2025, 6, 10, 19, 0)):
    return class_schedule_repository.create(db, obj_in={
        "class_id": gym_class.id,
        "start_time": start_time,
        "end_time": end_time,
        "room": "Sala 1",
        "available_spots": available_spots,
        "is_cancelled": is_cancelled,
    })


@pytest.fixture
def user(db):
    return make_user(db)


@pytest.fixture
def other_user(db):
    return make_user(db, email="other@gym.io", first_name="Luis", last_name="Pérez")


@pytest.fixture
def tier(db):
    return membership_tier_repository.create(db, obj_in={
        "name": "Anual",
        "description": "Acceso ilimitado durante un año",
        "price": Decimal("499.00"),
        "duration_months": 12,
        "features": ["sala", "clases"],
    })


@pytest.fixture
def inactive_tier(db):
    return membership_tier_repository.create(db, obj_in={
        "name": "Legacy",
        "description": "Plan retirado",
        "price": Decimal("30.00"),
        "duration_months": 1,
        "features": [],
        "is_active": False,
    })


@pytest.fixture
def trainer(db):
    return make_trainer(db)


@pytest.fixture
def unavailable_trainer(db):
    return make_trainer(db, email="resting@gym.io", is_available=False)


@pytest.fixture
def gym_class(db, trainer):
    return gym_class_repository.create(db, obj_in={
        "name": "Spinning",
        "description": "Ciclo indoor de 45 minutos",
        "instructor_id": trainer.id,
        "duration_minutes": 45,
        "capacity": 20,
        "difficulty_level": ClassDifficultyLevel.INTERMEDIATE,
    })


@pytest.fixture
def schedule(db, gym_class):
    return make_schedule(db, gym_class, available_spots=2)


@pytest.fixture
def full_schedule(db, gym_class):
    return make_schedule(db, gym_class, available_spots=0)


@pytest.fixture
def cancelled_schedule(db, gym_class):
    return make_schedule(db, gym_class, is_cancelled=True)


@pytest.fixture
def user_factory(db):
    """Crea usuarios adicionales con emails únicos"""
    def _create(index: int):
        return make_user(db, email=f"member{index}@gym.io", first_name=f"Socio{index}")
    return _create


@pytest.fixture
def trainer_factory(db):
    def _create(**kwargs):
        return make_trainer(db, **kwargs)
    return _create


@pytest.fixture
def schedule_factory(db, gym_class):
    def _create(**kwargs):
        return make_schedule(db, gym_class, **kwargs)
    return _create
