"""Health check endpoints."""

import logging

from fastapi import APIRouter
from sqlalchemy import text

from waitlist.core.config import settings
from waitlist.core.deps import DBSession
from waitlist.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"


async def _database_status(db: DBSession) -> str:
    """Ping the signup store. Failure detail goes to the log only."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database health check failed")
        return UNHEALTHY
    return HEALTHY


@router.get("/health", response_model=HealthResponse)
async def health_check(db: DBSession) -> HealthResponse:
    """Report service version, environment and database reachability."""
    database = await _database_status(db)
    return HealthResponse(
        status=database,
        version=settings.version,
        environment=settings.environment,
        checks={"database": database},
    )


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """Liveness check: the process is up and serving requests."""
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness_check(db: DBSession) -> dict[str, str]:
    """Readiness check: fails with the generic 500 until the database answers."""
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}
