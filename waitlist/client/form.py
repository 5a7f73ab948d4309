"""Signup form state machine.

Mirrors the marketing site's email form: ``idle -> loading -> success|error``.
Editing the email clears an error; ``reset()`` leaves the success state.
"""

import enum
import logging

from waitlist.client.api import WaitlistClient
from waitlist.schemas.signup import SignupSuccess
from waitlist.services.signup_service import INVALID_EMAIL_ERROR, is_valid_email

logger = logging.getLogger(__name__)

EMAIL_REQUIRED_ERROR = "Email is required"
GENERIC_ERROR = "Something went wrong. Please try again."


class FormState(str, enum.Enum):
    """Lifecycle of the signup form."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SignupForm:
    """Client-side signup form bound to a ``WaitlistClient``."""

    def __init__(self, client: WaitlistClient | None) -> None:
        self.client = client
        self.email = ""
        self.name = ""
        self.state = FormState.IDLE
        self.error_message = ""

    @property
    def submit_disabled(self) -> bool:
        return self.state == FormState.LOADING

    @property
    def inputs_disabled(self) -> bool:
        return self.state == FormState.LOADING

    def set_email(self, value: str) -> None:
        self.email = value
        if self.state == FormState.ERROR:
            self.state = FormState.IDLE

    def set_name(self, value: str) -> None:
        self.name = value

    async def submit(self) -> None:
        """Validate locally, call the mutation and record the outcome."""
        if self.submit_disabled:
            return

        self.error_message = ""
        email = self.email.strip()

        if not email:
            self._fail(EMAIL_REQUIRED_ERROR)
            return
        # Same check the server runs: untrimmed input with spaces is rejected
        if not is_valid_email(self.email):
            self._fail(INVALID_EMAIL_ERROR)
            return

        if self.client is None:
            logger.warning("Signup submitted but no API endpoint is configured")
            self._fail(GENERIC_ERROR)
            return

        self.state = FormState.LOADING
        try:
            result = await self.client.create_signup(email, self.name.strip() or None)
        except Exception:
            logger.exception("Signup request failed")
            self._fail(GENERIC_ERROR)
            return

        if isinstance(result, SignupSuccess):
            self.state = FormState.SUCCESS
            self.email = ""
            self.name = ""
        else:
            self._fail(result.error)

    def reset(self) -> None:
        """Start over after a successful signup ("sign up another email")."""
        self.email = ""
        self.name = ""
        self.error_message = ""
        self.state = FormState.IDLE

    def _fail(self, message: str) -> None:
        self.error_message = message
        self.state = FormState.ERROR
