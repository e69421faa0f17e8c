from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Obtener la instancia de configuración
settings_instance = get_settings()

db_url = settings_instance.DATABASE_URL

# Ocultar credenciales en el log
display_url = db_url
if '@' in display_url:
    scheme = display_url.split('://')[0]
    host_info = display_url.split('@', 1)[1]
    display_url = f"{scheme}://***@{host_info}"

logger.info(f"URL utilizada para crear el engine: {display_url}")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no aplica FOREIGN KEY salvo que se active por conexión
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False, **kwargs):
    """
    Crea el engine para la URL indicada.

    SQLite se usa en desarrollo y tests; cualquier otra URL se trata como
    PostgreSQL con pool de conexiones.
    """
    if url.startswith("sqlite"):
        sqlite_engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            **kwargs
        )
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings_instance.DB_POOL_SIZE,
        max_overflow=settings_instance.DB_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=180,
        **kwargs
    )


engine = build_engine(db_url, echo=settings_instance.SQLALCHEMY_ECHO)

# Crear clase de sesión
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependencia para obtener la sesión de DB
def get_db():
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de SQLAlchemy en la sesión: {e}", exc_info=True)
        db.rollback()  # Hacer rollback en caso de error
        raise  # Relanzar la excepción para que FastAPI la maneje
    finally:
        # Asegurarse siempre de cerrar la sesión
        db.close()
