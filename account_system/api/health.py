"""
Health check endpoint.

Reports whether the application is up and can reach its
database.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from account_system.config import get_settings
from account_system.models.base import get_db

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Return application health including database connectivity.

    A failing database query downgrades the status instead of
    failing the request, so monitors can tell the two apart.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception:
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": "account-system",
        "version": get_settings().APP_VERSION,
        "database": db_status,
    }
