"""API v1 router combining all route modules."""

from fastapi import APIRouter

from waitlist.api.v1 import health, signups

api_router = APIRouter()

# Include health check routes (no prefix)
api_router.include_router(health.router)

# Waitlist signups (public, no auth)
api_router.include_router(
    signups.router,
    prefix="/signups",
    tags=["signups"],
)
