"""Waitlist signup API endpoint."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from waitlist.core.deps import DBSession
from waitlist.schemas.signup import SignupCreate, SignupFailure, SignupSuccess
from waitlist.services.signup_service import DUPLICATE_EMAIL_ERROR, SignupService

router = APIRouter()


@router.post(
    "",
    response_model=SignupSuccess,
    status_code=status.HTTP_201_CREATED,
    summary="Join the waitlist",
    description="Add an email (and optional name) to the waitlist.",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": SignupFailure, "description": "Invalid email"},
        status.HTTP_409_CONFLICT: {"model": SignupFailure, "description": "Already signed up"},
    },
)
async def create_signup(
    data: SignupCreate,
    db: DBSession,
) -> SignupSuccess | JSONResponse:
    """Create a signup, or return a structured failure."""
    service = SignupService(db)
    result = await service.create_signup(data.email, data.name)

    if isinstance(result, SignupSuccess):
        return result

    status_code = (
        status.HTTP_409_CONFLICT
        if result.error == DUPLICATE_EMAIL_ERROR
        else status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))
