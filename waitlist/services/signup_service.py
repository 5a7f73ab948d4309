"""Waitlist signup service: validation, conditional insert and lookup."""

import logging
import re

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from waitlist.models.signup import Signup
from waitlist.schemas.signup import SignupFailure, SignupResult, SignupSuccess

logger = logging.getLogger(__name__)

INVALID_EMAIL_ERROR = "Please enter a valid email address"
DUPLICATE_EMAIL_ERROR = "This email is already signed up"

# local@domain.tld with no whitespace, a single "@" and no NUL (Postgres text rejects it)
EMAIL_PATTERN = re.compile(r"[^\s@\x00]+@[^\s@\x00]+\.[^\s@\x00]+")


def is_valid_email(email: str) -> bool:
    """Check an email against the basic ``local@domain.suffix`` shape."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def normalize_email(email: str) -> str:
    """Trim and lower-case an email for storage and comparison."""
    return email.strip().lower()


def normalize_name(name: str | None) -> str | None:
    """Trim a display name; blank names become ``None``."""
    if name is None:
        return None
    return name.strip() or None


class SignupService:
    """Create and look up waitlist signups."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_signup(self, email: str, name: str | None = None) -> SignupResult:
        """Validate and insert a signup unless the email is already taken.

        The uniqueness check and the insert are one statement
        (``INSERT ... ON CONFLICT (email) DO NOTHING RETURNING id``), so two
        concurrent submissions of the same address cannot both succeed.
        """
        if not is_valid_email(email):
            return SignupFailure(error=INVALID_EMAIL_ERROR)

        values = {"email": normalize_email(email), "name": normalize_name(name)}
        insert = pg_insert if self._dialect_name() == "postgresql" else sqlite_insert
        stmt = (
            insert(Signup)
            .values(**values)
            .on_conflict_do_nothing(index_elements=["email"])
            .returning(Signup.id)
        )

        result = await self.db.execute(stmt)
        signup_id = result.scalar_one_or_none()

        if signup_id is None:
            await self.db.rollback()
            logger.info("Rejected duplicate signup")
            return SignupFailure(error=DUPLICATE_EMAIL_ERROR)

        await self.db.commit()
        logger.info("Created signup %s", signup_id)
        return SignupSuccess(id=signup_id)

    async def get_signup_by_email(self, email: str) -> Signup | None:
        """Exact-match lookup on the normalized email.

        Raises ``MultipleResultsFound`` if the uniqueness invariant is ever
        broken.
        """
        stmt = select(Signup).where(Signup.email == normalize_email(email))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _dialect_name(self) -> str:
        return self.db.get_bind().dialect.name
