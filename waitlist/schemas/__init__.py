"""Pydantic schemas for request/response validation."""

from waitlist.schemas.common import HealthResponse
from waitlist.schemas.signup import (
    SignupCreate,
    SignupFailure,
    SignupResult,
    SignupSuccess,
)

__all__ = [
    "HealthResponse",
    "SignupCreate",
    "SignupFailure",
    "SignupResult",
    "SignupSuccess",
]
