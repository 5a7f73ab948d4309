"""SQLAlchemy models."""

from waitlist.models.base import Base
from waitlist.models.signup import Signup

__all__ = [
    "Base",
    "Signup",
]
