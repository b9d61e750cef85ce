"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from arcade.db.database import check_connection, get_db

router = APIRouter()


@router.get("/health")
def health_check(db: Session = Depends(get_db)) -> dict[str, str]:
    """Return application and database health status."""
    if check_connection(db):
        return {"status": "ok", "database": "connected"}
    return {"status": "error", "database": "disconnected"}
