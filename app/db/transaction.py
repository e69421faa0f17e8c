from contextlib import contextmanager
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import GymBookingError, StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_transaction(db: Session, operation: str):
    """
    Ejecuta un bloque de lectura-comprobación-escritura como una unidad.

    Cualquier error revierte la transacción (y libera los bloqueos FOR UPDATE
    adquiridos dentro del bloque). Los errores de SQLAlchemy se convierten en
    StoreError; los errores de negocio se relanzan sin cambios.

    Uso:
        with store_transaction(db, "book_class"):
            schedule = class_schedule_repository.get_for_update(db, schedule_id)
            ...
            db.commit()
    """
    try:
        yield
    except GymBookingError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error de base de datos en {operation}: {e}", exc_info=True)
        raise StoreError(f"Database error during {operation}") from e
