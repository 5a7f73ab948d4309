"""HTTP client for the waitlist signup mutation using httpx."""

import logging

import httpx

from waitlist.core.config import settings
from waitlist.schemas.signup import SignupResult, signup_result_adapter

logger = logging.getLogger(__name__)

# Statuses whose body is a structured SignupResult
_RESULT_STATUSES = frozenset({201, 400, 409})


class WaitlistClient:
    """Async client for ``POST /api/v1/signups``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.signups_url = f"{self.base_url}{settings.api_v1_prefix}/signups"
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls) -> "WaitlistClient | None":
        """Build a client from ``API_URL``; ``None`` when it is not configured."""
        if not settings.api_url:
            logger.warning("API_URL is not set; signup form will be unavailable")
            return None
        return cls(settings.api_url)

    async def create_signup(self, email: str, name: str | None = None) -> SignupResult:
        """Invoke the signup mutation.

        Raises ``httpx.HTTPError`` on transport failures and unexpected
        statuses, and ``pydantic.ValidationError`` on a malformed body.
        """
        payload: dict[str, str] = {"email": email}
        if name is not None:
            payload["name"] = name

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.signups_url, json=payload)

        if response.status_code not in _RESULT_STATUSES:
            response.raise_for_status()
            raise httpx.HTTPStatusError(
                f"Unexpected status {response.status_code}",
                request=response.request,
                response=response,
            )

        return signup_result_adapter.validate_json(response.content)
