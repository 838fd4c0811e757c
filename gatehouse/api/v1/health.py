"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gatehouse.api.deps import SettingsDep
from gatehouse.core.database import check_db_connected, get_db
from gatehouse.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    settings: SettingsDep,
    db: Annotated[Session, Depends(get_db)],
) -> HealthResponse:
    """Service status, environment, active password scheme and database reachability."""
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        password_scheme=settings.PASSWORD_SCHEME,
        database=db_status,
    )
