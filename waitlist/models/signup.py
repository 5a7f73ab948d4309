"""Signup model for waitlist entries."""

from sqlalchemy import Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from waitlist.models.base import Base


class Signup(Base):
    """A single waitlist signup.

    ``email`` is stored normalized (trimmed, lower-cased). The unique
    constraint doubles as the exact-match lookup index and is the conflict
    target for the conditional insert in ``SignupService``.
    """

    __tablename__ = "signups"
    __table_args__ = (UniqueConstraint("email", name="uq_signups_email"),)

    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    name: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Signup {self.email}>"
