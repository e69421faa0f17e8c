import logging

from app.db.base import Base
from app.db.session import engine

logger = logging.getLogger(__name__)


def create_tables(bind=None):
    """Crear todas las tablas en la base de datos si no existen"""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Tablas creadas exitosamente.")


if __name__ == "__main__":
    create_tables()
