"""Pydantic schemas for the signup mutation."""

from typing import Literal
from uuid import UUID

from pydantic import Field, TypeAdapter

from waitlist.schemas.common import BaseSchema


class SignupCreate(BaseSchema):
    """Request body for creating a signup."""

    email: str = Field(..., description="Email address to add to the waitlist")
    name: str | None = Field(default=None, description="Optional display name")


class SignupSuccess(BaseSchema):
    """Successful mutation result."""

    success: Literal[True] = True
    id: UUID


class SignupFailure(BaseSchema):
    """Failed mutation result with a user-facing message."""

    success: Literal[False] = False
    error: str


SignupResult = SignupSuccess | SignupFailure

signup_result_adapter: TypeAdapter[SignupResult] = TypeAdapter(SignupResult)
