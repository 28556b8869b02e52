from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ezelectronics.data.database import get_db
from ezelectronics.domain.schemas import HealthOut
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.warning(f"Health check: database unreachable: {e}")
        database = "disconnected"

    return {"status": "healthy" if database == "connected" else "unhealthy", "database": database}
