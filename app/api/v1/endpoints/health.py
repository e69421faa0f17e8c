import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.timezone_utils import utc_now
from app.db.session import get_db
from app.schemas.health import HealthCheck

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthCheck)
def health_check(db: Session = Depends(get_db)) -> Any:
    """Comprueba que la API responde y que la base de datos acepta consultas"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check: base de datos no disponible: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "error", "timestamp": utc_now().isoformat(), "database": "error"}
        )
    return HealthCheck(status="ok", timestamp=utc_now())
